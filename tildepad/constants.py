"""Constants and configuration for the tildepad editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    NAME = "tildepad"

    # Glyphs substituted when rendering
    ELLIPSIS = "⋯"  # Marks text cut at a window edge
    WHITESPACE_GLYPH = "␣"  # Visible whitespace other than plain space/tab
    CONTROL_GLYPH = "▯"  # Lone control character
    ZERO_WIDTH_GLYPH = "·"  # Other zero-width graphemes
    FILLER_ROW = "~"  # Rows past the end of the document

    # Quitting with unsaved changes
    QUIT_TIMES = 3

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize

    # Prompts
    SEARCH_PROMPT = "Search (Esc to cancel, Arrows to navigate): "
    SAVE_PROMPT = "Save as: "

    # Status messages
    HELP_MESSAGE = "HELP: Ctrl-F = find | Ctrl-S = save | Ctrl-Q = quit"
    SAVED_MESSAGE = "File saved successfully"
    SAVE_FAILED_MESSAGE = "Could not save file"
    SAVE_ABORTED_MESSAGE = "Save aborted."
    OPEN_FAILED_MESSAGE = "ERR: Could not open file: {}"
    QUIT_WARNING_MESSAGE = "WARNING! File has unsaved changes. Press Ctrl-Q {} more times to quit."
    UNTITLED = "[No Name]"
