#!/usr/bin/env python3
"""tildepad - a small terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys, Home/End, PageUp/PageDown: Move the cursor
    Ctrl-F: Search (Up/Down cycle matches, Enter keeps, Esc cancels)
    Ctrl-S: Save file (asks for a name if the buffer has none)
    Ctrl-Q: Quit (press repeatedly to discard unsaved changes)
"""

from tildepad.__main__ import main


if __name__ == "__main__":
    main()
