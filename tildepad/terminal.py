"""Terminal interface using Blessed for display and Curtsies for input."""

import select
import sys
from dataclasses import dataclass
from typing import Optional

import blessed
from curtsies import Input

from .annotated_text import AnnotatedText, AnnotationType


@dataclass
class Position:
    """A screen cell, zero-based."""
    row: int = 0
    col: int = 0

    def saturating_sub(self, other: "Position") -> "Position":
        return Position(max(0, self.row - other.row), max(0, self.col - other.col))


@dataclass
class Size:
    height: int = 0
    width: int = 0


@dataclass(frozen=True)
class Attribute:
    foreground: Optional[tuple[int, int, int]] = None
    background: Optional[tuple[int, int, int]] = None


ATTRIBUTES = {
    AnnotationType.MATCH: Attribute((0, 0, 0), (211, 211, 211)),
    AnnotationType.SELECTED_MATCH: Attribute((0, 0, 0), (255, 255, 0)),
    AnnotationType.NUMBER: Attribute((123, 160, 255)),
    AnnotationType.KEYWORD: Attribute((217, 95, 237)),
    AnnotationType.TYPE: Attribute((175, 225, 175)),
    AnnotationType.KNOWN_VALUE: Attribute((195, 100, 73)),
    AnnotationType.CHAR: Attribute((255, 191, 0)),
    AnnotationType.LIFETIME_SPECIFIER: Attribute((176, 224, 230)),
}


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Drawing calls only queue output; ``execute`` writes it out.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[Input] = None
        self._pending: list[str] = []

    def setup(self):
        """Enter fullscreen mode and start reading keys in raw mode."""
        self._queue(self.term.enter_fullscreen + self.term.clear)
        self.execute()
        self.is_fullscreen = True
        if self._curtsies_input is None:
            self._curtsies_input = Input(keynames='curtsies')
            self._curtsies_input.__enter__()

    def cleanup(self):
        """Leave fullscreen mode and restore the terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            self._queue(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor)
            self.execute()
            self.is_fullscreen = False

    def _queue(self, text: str) -> None:
        self._pending.append(text)

    def execute(self) -> None:
        """Write all queued output to the terminal."""
        if self._pending:
            print(''.join(self._pending), end='', flush=True)
            self._pending.clear()

    def size(self) -> Size:
        return Size(height=self.term.height, width=self.term.width)

    def hide_caret(self) -> None:
        self._queue(self.term.hide_cursor)

    def show_caret(self) -> None:
        self._queue(self.term.normal_cursor)

    def move_caret_to(self, position: Position) -> None:
        self._queue(self.term.move(position.row, position.col))

    def print_row(self, row: int, text: str) -> None:
        self._queue(self.term.move(row, 0) + self.term.clear_eol + text)

    def print_inverted_row(self, row: int, text: str) -> None:
        width = self.term.width
        self._queue(self.term.move(row, 0) + self.term.clear_eol
                    + self.term.reverse + text[:width].ljust(width) + self.term.normal)

    def _style(self, annotation_type: Optional[AnnotationType]) -> str:
        attribute = ATTRIBUTES.get(annotation_type) if annotation_type is not None else None
        if attribute is None:
            return ''
        style = ''
        if attribute.foreground is not None:
            style += self.term.color_rgb(*attribute.foreground)
        if attribute.background is not None:
            style += self.term.on_color_rgb(*attribute.background)
        return style

    def print_annotated_row(self, row: int, annotated_text: AnnotatedText) -> None:
        out = [self.term.move(row, 0), self.term.clear_eol]
        for part in annotated_text:
            style = self._style(part.annotation_type)
            if style:
                out.append(style + part.text + self.term.normal)
            else:
                out.append(part.text)
        self._queue(''.join(out))

    def get_key(self, timeout=None):
        """Get a single keypress as a curtsies key name.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The key name, or None if nothing arrived in time.
        """
        if self._curtsies_input is None:
            return None
        if timeout is not None:
            ready, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not ready:
                return None
        event = next(self._curtsies_input)
        return str(event)
