"""The text area: cursor movement, scrolling, editing, search and drawing.

The view works in three coordinate systems:

- document locations (line index, grapheme index) for the cursor;
- document positions (row, column) where the column is the rendered width
  of the graphemes before the cursor;
- screen positions, which are document positions minus the scroll offset.

Vertical moves keep the column the user last chose horizontally, stored as
``prev_text_location``. Scrolling is minimal: the offset only changes when
the cursor would otherwise leave the visible area.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from .commands import Delete, DeleteBackward, Edit, Insert, InsertNewline, Move
from .components import DocumentStatus, UIComponent
from .constants import EditorConstants
from .document import Document, Location
from .highlighter import Highlighter
from .terminal import Position, Size
from .version import __version__


@dataclass
class SearchInfo:
    """State of an ongoing search.

    ``prev_location`` and ``prev_scroll_offset`` are where the user was
    when the search started, restored if the search is dismissed.
    """
    prev_location: Location
    prev_scroll_offset: Position
    query: Optional[str] = None
    results: list[Location] = field(default_factory=list)
    current_idx: Optional[int] = None

    @property
    def selected(self) -> Optional[Location]:
        if self.current_idx is None or not self.results:
            return None
        return self.results[self.current_idx]


def build_welcome_message(width: int) -> str:
    if width <= 0:
        return ""
    message = f"{EditorConstants.NAME} - version {__version__}"
    remaining_width = width - 1
    if remaining_width <= len(message):
        return EditorConstants.FILLER_ROW
    return f"{EditorConstants.FILLER_ROW}{message:^{remaining_width}}"


class View(UIComponent):
    def __init__(self, terminal, page_moves_update_column: bool = False):
        super().__init__(terminal)
        self.document = Document()
        self.text_location = Location()
        self.prev_text_location = Location()
        self.scroll_offset = Position()
        self.search_info: Optional[SearchInfo] = None
        self.page_moves_update_column = page_moves_update_column

    # Files

    def load_file(self, path: str) -> None:
        """Replace the document with the contents of ``path``.

        Raises:
            StorageError: If the file cannot be read; the current document is kept
        """
        self.document = Document.load(path)
        self.text_location = Location()
        self.prev_text_location = Location()
        self.scroll_offset = Position()
        self.set_needs_redraw(True)

    def save_file(self) -> None:
        self.document.save()

    def save_as(self, path: str) -> None:
        self.document.save_as(path)

    @property
    def is_file_loaded(self) -> bool:
        return self.document.is_file_loaded

    def get_status(self) -> DocumentStatus:
        file_info = self.document.file_info
        return DocumentStatus(
            total_lines=self.document.height,
            current_line_index=self.text_location.line_index,
            current_grapheme_index=self.text_location.grapheme_index,
            is_modified=self.document.is_dirty,
            file_name=str(file_info),
            file_type=file_info.file_type,
        )

    # Search

    def enter_search(self) -> None:
        self.search_info = SearchInfo(
            prev_location=replace(self.text_location),
            prev_scroll_offset=replace(self.scroll_offset),
        )

    def exit_search(self) -> None:
        """Finish the search and keep the cursor where it is."""
        self.search_info = None
        self.set_needs_redraw(True)

    def dismiss_search(self) -> None:
        """Cancel the search and go back to where it started."""
        if self.search_info is not None:
            self.text_location = replace(self.search_info.prev_location)
            self.prev_text_location = replace(self.text_location)
            self.scroll_offset = replace(self.search_info.prev_scroll_offset)
        self.exit_search()

    def search(self, query: str) -> None:
        """Search for ``query`` and jump to the first match at or after the start."""
        if self.search_info is None:
            self.enter_search()
        search_info = self.search_info
        search_info.query = query or None
        search_info.results = self.document.search(query) if query else []
        search_info.current_idx = None
        self.set_needs_redraw(True)
        if not search_info.results:
            return

        search_info.current_idx = next(
            (idx for idx, location in enumerate(search_info.results)
             if location >= search_info.prev_location),
            0,
        )
        self._move_to_search_result()

    def next_search_result(self) -> None:
        self._step_search_result(1)

    def prev_search_result(self) -> None:
        self._step_search_result(-1)

    def _step_search_result(self, step: int) -> None:
        search_info = self.search_info
        if search_info is None or not search_info.results or search_info.current_idx is None:
            return
        search_info.current_idx = (search_info.current_idx + step) % len(search_info.results)
        self._move_to_search_result()

    def _move_to_search_result(self) -> None:
        self.text_location = replace(self.search_info.selected)
        self.prev_text_location = replace(self.text_location)
        self.set_needs_redraw(True)
        self.scroll_text_location_into_view()

    # Editing

    def handle_edit_command(self, command: Edit) -> None:
        if isinstance(command, Insert):
            self.insert_char(command.character)
        elif isinstance(command, DeleteBackward):
            self.delete_char_backward()
        elif isinstance(command, Delete):
            self.delete_char()
        elif isinstance(command, InsertNewline):
            self.insert_newline()

    def insert_char(self, character: str) -> None:
        line_index = self.text_location.line_index
        old_len = self.document.grapheme_count(line_index)
        self.document.insert_char(character, self.text_location)
        new_len = self.document.grapheme_count(line_index)
        # A combining character can merge into the previous grapheme.
        if new_len > old_len:
            self.handle_move_command(Move.RIGHT)
        self.set_needs_redraw(True)

    def delete_char(self) -> None:
        self.document.delete_char(self.text_location)
        self.set_needs_redraw(True)

    def delete_char_backward(self) -> None:
        if self.text_location.line_index != 0 or self.text_location.grapheme_index != 0:
            self.handle_move_command(Move.LEFT)
            self.delete_char()

    def insert_newline(self) -> None:
        self.document.insert_newline(self.text_location)
        self.handle_move_command(Move.RIGHT)
        self.set_needs_redraw(True)

    # Movement

    def handle_move_command(self, command: Move) -> None:
        page = max(0, self.size.height - 1)
        if command is Move.UP:
            self.move_up(1)
        elif command is Move.DOWN:
            self.move_down(1)
        elif command is Move.LEFT:
            self.move_left()
        elif command is Move.RIGHT:
            self.move_right()
        elif command is Move.PAGE_UP:
            self.move_up(page)
            if self.page_moves_update_column:
                self.prev_text_location = replace(self.text_location)
        elif command is Move.PAGE_DOWN:
            self.move_down(page)
            if self.page_moves_update_column:
                self.prev_text_location = replace(self.text_location)
        elif command is Move.START_OF_LINE:
            self.move_to_start_of_line()
            self.prev_text_location = replace(self.text_location)
        elif command is Move.END_OF_LINE:
            self.move_to_end_of_line()
            self.prev_text_location = replace(self.text_location)
        self.scroll_text_location_into_view()

    def _move_to_line(self, line_index: int) -> None:
        line_index = min(max(0, line_index), self.document.height)
        self.text_location.line_index = line_index
        self.text_location.grapheme_index = min(
            self.document.grapheme_count(line_index),
            self.prev_text_location.grapheme_index,
        )

    def move_up(self, step: int) -> None:
        self._move_to_line(self.text_location.line_index - step)

    def move_down(self, step: int) -> None:
        self._move_to_line(self.text_location.line_index + step)

    def move_right(self) -> None:
        if self.text_location.grapheme_index < self.document.grapheme_count(self.text_location.line_index):
            self.text_location.grapheme_index += 1
        elif self.text_location.line_index < self.document.height:
            self.text_location = Location(self.text_location.line_index + 1, 0)
        self.prev_text_location = replace(self.text_location)

    def move_left(self) -> None:
        if self.text_location.grapheme_index > 0:
            self.text_location.grapheme_index -= 1
        elif self.text_location.line_index > 0:
            line_index = self.text_location.line_index - 1
            self.text_location = Location(line_index, self.document.grapheme_count(line_index))
        self.prev_text_location = replace(self.text_location)

    def move_to_start_of_line(self) -> None:
        self.text_location.grapheme_index = 0

    def move_to_end_of_line(self) -> None:
        self.text_location.grapheme_index = self.document.grapheme_count(self.text_location.line_index)

    # Scrolling

    def _scroll_vertically(self, to: int) -> None:
        height = self.size.height
        if to < self.scroll_offset.row:
            self.scroll_offset.row = to
        elif to >= self.scroll_offset.row + height:
            self.scroll_offset.row = max(0, to - height + 1)
        else:
            return
        self.set_needs_redraw(True)

    def _scroll_horizontally(self, to: int) -> None:
        width = self.size.width
        if to < self.scroll_offset.col:
            self.scroll_offset.col = to
        elif to >= self.scroll_offset.col + width:
            self.scroll_offset.col = max(0, to - width + 1)
        else:
            return
        self.set_needs_redraw(True)

    def text_location_to_position(self) -> Position:
        row = self.text_location.line_index
        col = self.document.width_until(row, self.text_location.grapheme_index)
        return Position(row, col)

    def scroll_text_location_into_view(self) -> None:
        position = self.text_location_to_position()
        self._scroll_vertically(position.row)
        self._scroll_horizontally(position.col)

    def caret_position(self) -> Position:
        return self.text_location_to_position().saturating_sub(self.scroll_offset)

    # Drawing

    def set_size(self, size: Size) -> None:
        self.size = size
        self.scroll_text_location_into_view()

    def _search_results_for(self, line_index: int) -> Optional[list[int]]:
        if self.search_info is None or not self.search_info.results:
            return None
        return [location.grapheme_index for location in self.search_info.results
                if location.line_index == line_index]

    def draw(self, origin_row: int) -> None:
        width, height = self.size.width, self.size.height
        top_third = height // 3
        scroll_top = self.scroll_offset.row

        query = self.search_info.query if self.search_info is not None else None
        selected_match = self.search_info.selected if query else None
        highlighter = Highlighter(self.document.file_info.file_type, query, selected_match)

        for line_index in range(scroll_top, scroll_top + height):
            self.document.highlight(line_index, self._search_results_for(line_index), highlighter)

        columns = range(self.scroll_offset.col, self.scroll_offset.col + width)
        for row in range(origin_row, origin_row + height):
            line_index = row - origin_row + scroll_top
            annotated = self.document.get_highlighted_substring(line_index, columns, highlighter)
            if annotated is not None:
                self.terminal.print_annotated_row(row, annotated)
            elif row - origin_row == top_third and self.document.is_empty:
                self.terminal.print_row(row, build_welcome_message(width))
            else:
                self.terminal.print_row(row, EditorConstants.FILLER_ROW)
