"""Screen components: the shared redraw protocol and the bottom bars."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .commands import Delete, DeleteBackward, Edit, Insert, Move
from .file_info import FileType
from .line import Line
from .terminal import Size

logger = logging.getLogger(__name__)


class UIComponent(ABC):
    """A rectangular area of the screen that redraws itself on demand."""

    def __init__(self, terminal):
        self.terminal = terminal
        self.size = Size()
        self._needs_redraw = True

    def set_needs_redraw(self, value: bool) -> None:
        self._needs_redraw = value

    @property
    def needs_redraw(self) -> bool:
        return self._needs_redraw

    def resize(self, size: Size) -> None:
        self.set_size(size)
        self.set_needs_redraw(True)

    def set_size(self, size: Size) -> None:
        self.size = size

    def render(self, origin_row: int) -> None:
        """Draw the component if it needs it.

        A failed draw is logged and the component stays marked for redraw.
        """
        if not self._needs_redraw:
            return
        try:
            self.draw(origin_row)
        except OSError as e:
            logger.error(f"Could not render {type(self).__name__}: {e}")
            return
        self._needs_redraw = False

    @abstractmethod
    def draw(self, origin_row: int) -> None:
        pass


@dataclass
class DocumentStatus:
    total_lines: int = 0
    current_line_index: int = 0
    current_grapheme_index: int = 0
    is_modified: bool = False
    file_name: str = ""
    file_type: FileType = FileType.TEXT

    def modified_indicator_to_string(self) -> str:
        return "(modified)" if self.is_modified else ""

    def line_count_to_string(self) -> str:
        return f"{self.total_lines} lines"

    def position_indicator_to_string(self) -> str:
        return f"{self.current_line_index + 1}:{self.current_grapheme_index + 1}"

    def file_type_to_string(self) -> str:
        return str(self.file_type)


class StatusBar(UIComponent):
    def __init__(self, terminal):
        super().__init__(terminal)
        self.current_status = DocumentStatus()

    def update_status(self, new_status: DocumentStatus) -> None:
        if new_status != self.current_status:
            self.current_status = new_status
            self.set_needs_redraw(True)

    def status_text(self) -> str:
        """The status row, or an empty string if it does not fit."""
        status = self.current_status
        beginning = (f"{status.file_name} - {status.line_count_to_string()} "
                     f"{status.modified_indicator_to_string()}")
        position = f"{status.file_type_to_string()} | {status.position_indicator_to_string()}"
        remainder_len = max(0, self.size.width - len(beginning))
        text = f"{beginning}{position:>{remainder_len}}"
        return text if len(text) <= self.size.width else ""

    def draw(self, origin_row: int) -> None:
        self.terminal.print_inverted_row(origin_row, self.status_text())


class MessageBar(UIComponent):
    def __init__(self, terminal):
        super().__init__(terminal)
        self.current_message = ""

    def update_message(self, new_message: str) -> None:
        if new_message != self.current_message:
            self.current_message = new_message
            self.set_needs_redraw(True)

    def draw(self, origin_row: int) -> None:
        self.terminal.print_row(origin_row, self.current_message[:self.size.width])


class CommandBar(UIComponent):
    """A one-line prompt with an editable value.

    The caret is a grapheme index into the value.
    """

    def __init__(self, terminal, prompt: str = ""):
        super().__init__(terminal)
        self.prompt = Line(prompt)
        self._value = Line()
        self.caret = 0

    @property
    def value(self) -> str:
        return str(self._value)

    def set_prompt(self, prompt: str) -> None:
        self.prompt = Line(prompt)
        self.caret = min(self.caret, self._value.grapheme_count())
        self.set_needs_redraw(True)

    def clear_value(self) -> None:
        self._value = Line()
        self.caret = 0
        self.set_needs_redraw(True)

    def caret_position_col(self) -> int:
        return min(self.prompt.width() + self._value.width_until(self.caret), self.size.width)

    def handle_edit_command(self, command: Edit) -> None:
        if isinstance(command, Insert):
            self._value.insert_char(command.character, self.caret)
            self.caret = min(self.caret + 1, self._value.grapheme_count())
        elif isinstance(command, Delete):
            self._value.delete_char(self.caret)
        elif isinstance(command, DeleteBackward):
            if self.caret > 0:
                self.caret -= 1
                self._value.delete_char(self.caret)
        self.set_needs_redraw(True)

    def handle_move_command(self, command: Move) -> None:
        if command is Move.LEFT:
            self.caret = max(0, self.caret - 1)
        elif command is Move.RIGHT:
            self.caret = min(self._value.grapheme_count(), self.caret + 1)
        elif command in (Move.START_OF_LINE, Move.UP, Move.PAGE_UP):
            self.caret = 0
        else:
            self.caret = self._value.grapheme_count()

    def visible_text(self) -> str:
        area_for_value = max(0, self.size.width - self.prompt.width())
        value_end = self._value.width()
        value_start = max(0, value_end - area_for_value)
        text = str(self.prompt) + self._value.visible_graphemes(range(value_start, value_end))
        return text if self.prompt.width() <= self.size.width else ""

    def draw(self, origin_row: int) -> None:
        self.terminal.print_row(origin_row, self.visible_text())
