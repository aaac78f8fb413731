"""The document: an ordered list of lines plus file identity and dirty state."""

from dataclasses import dataclass
from typing import Optional

from .annotated_text import AnnotatedText
from .file_info import FileInfo
from .highlighter import Highlighter
from .line import Line
from .storage import load_lines, save_lines


@dataclass(order=True)
class Location:
    """A cursor position in document coordinates.

    Ordering compares the line first, then the grapheme.
    """
    line_index: int = 0
    grapheme_index: int = 0


class Document:
    def __init__(self, lines: Optional[list[Line]] = None, file_info: Optional[FileInfo] = None):
        self._lines: list[Line] = lines if lines is not None else []
        self.file_info = file_info if file_info is not None else FileInfo()
        self.dirty = False

    @classmethod
    def load(cls, path: str) -> "Document":
        """Load a document from ``path``.

        Raises:
            StorageError: If the file cannot be read
        """
        lines = [Line(text) for text in load_lines(path)]
        return cls(lines, FileInfo.from_path(path))

    @property
    def height(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def is_dirty(self) -> bool:
        return self.dirty

    @property
    def is_file_loaded(self) -> bool:
        return self.file_info.has_path

    @property
    def lines(self) -> list[str]:
        return [str(line) for line in self._lines]

    def line(self, line_index: int) -> Optional[Line]:
        if 0 <= line_index < len(self._lines):
            return self._lines[line_index]
        return None

    def grapheme_count(self, line_index: int) -> int:
        line = self.line(line_index)
        return line.grapheme_count() if line is not None else 0

    def width_until(self, line_index: int, grapheme_index: int) -> int:
        line = self.line(line_index)
        return line.width_until(grapheme_index) if line is not None else 0

    def highlight(self, line_index: int, search_results: Optional[list[int]],
                  highlighter: Highlighter) -> None:
        line = self.line(line_index)
        if line is not None:
            highlighter.highlight(line_index, line, search_results)

    def get_highlighted_substring(self, line_index: int, columns: range,
                                  highlighter: Highlighter) -> Optional[AnnotatedText]:
        line = self.line(line_index)
        if line is None:
            return None
        return line.visible_substring(columns, highlighter.get_annotations(line_index))

    def search(self, query: str) -> list[Location]:
        return [
            Location(line_index, grapheme_index)
            for line_index, line in enumerate(self._lines)
            for grapheme_index in line.search(query)
        ]

    def insert_char(self, character: str, at: Location) -> None:
        if at.line_index > self.height:
            return
        if at.line_index == self.height:
            self._lines.append(Line(character))
        else:
            self._lines[at.line_index].insert_char(character, at.grapheme_index)
        self.dirty = True

    def delete_char(self, at: Location) -> None:
        line = self.line(at.line_index)
        if line is None:
            return
        if at.grapheme_index >= line.grapheme_count() and self.height > at.line_index + 1:
            next_line = self._lines.pop(at.line_index + 1)
            line.append(next_line)
            self.dirty = True
        elif at.grapheme_index < line.grapheme_count():
            line.delete_char(at.grapheme_index)
            self.dirty = True

    def insert_newline(self, at: Location) -> None:
        if at.line_index == self.height:
            self._lines.append(Line())
            self.dirty = True
            return
        line = self.line(at.line_index)
        if line is not None:
            self._lines.insert(at.line_index + 1, line.split(at.grapheme_index))
            self.dirty = True

    def save(self) -> None:
        """Write the document to its current path.

        Raises:
            StorageError: If the file cannot be written
        """
        if self.file_info.path is None:
            return
        save_lines(self.file_info.path, self.lines)
        self.dirty = False

    def save_as(self, path: str) -> None:
        """Write the document to ``path`` and adopt it as the document's file.

        Raises:
            StorageError: If the file cannot be written
        """
        file_info = FileInfo.from_path(path)
        save_lines(path, self.lines)
        self.file_info = file_info
        self.dirty = False
