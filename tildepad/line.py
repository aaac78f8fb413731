"""A single line of text split into grapheme-cluster fragments."""

import logging
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

import grapheme
import wcwidth

from .annotated_text import AnnotatedText, Annotation
from .constants import EditorConstants

logger = logging.getLogger(__name__)


class GraphemeWidth(Enum):
    HALF = 1
    FULL = 2

    @property
    def columns(self) -> int:
        return self.value


@dataclass(frozen=True)
class TextFragment:
    grapheme: str
    rendered_width: GraphemeWidth
    replacement: Optional[str]
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.grapheme)


def grapheme_width(cluster: str) -> int:
    """Return the terminal display width of a grapheme cluster.

    Non-printable code points count as zero columns.
    """
    width = wcwidth.wcswidth(cluster)
    if width < 0:
        width = sum(max(0, wcwidth.wcwidth(ch)) for ch in cluster)
    return width


def replacement_for(cluster: str) -> Optional[str]:
    """Return the glyph shown instead of ``cluster``, if it needs one."""
    if cluster == " ":
        return None
    if cluster == "\t":
        return " "
    width = grapheme_width(cluster)
    if width > 0 and not cluster.strip():
        return EditorConstants.WHITESPACE_GLYPH
    if width == 0:
        if len(cluster) == 1 and unicodedata.category(cluster) == "Cc":
            return EditorConstants.CONTROL_GLYPH
        return EditorConstants.ZERO_WIDTH_GLYPH
    return None


def str_to_fragments(text: str) -> list[TextFragment]:
    fragments = []
    start = 0
    for cluster in grapheme.graphemes(text):
        replacement = replacement_for(cluster)
        if replacement is not None:
            rendered_width = GraphemeWidth.HALF
        elif grapheme_width(cluster) >= 2:
            rendered_width = GraphemeWidth.FULL
        else:
            rendered_width = GraphemeWidth.HALF
        fragments.append(TextFragment(cluster, rendered_width, replacement, start))
        start += len(cluster)
    return fragments


class Line:
    """Backing string plus its fragment list.

    The fragment list is rebuilt from scratch after every mutation.
    """

    def __init__(self, text: str = ""):
        self._string = text
        self._fragments = str_to_fragments(text)

    @classmethod
    def from_str(cls, text: str) -> "Line":
        return cls(text)

    def _rebuild_fragments(self) -> None:
        self._fragments = str_to_fragments(self._string)

    @property
    def fragments(self) -> tuple[TextFragment, ...]:
        return tuple(self._fragments)

    def grapheme_count(self) -> int:
        return len(self._fragments)

    def width_until(self, grapheme_index: int) -> int:
        return sum(fragment.rendered_width.columns for fragment in self._fragments[:grapheme_index])

    def width(self) -> int:
        return self.width_until(self.grapheme_count())

    def grapheme_offset(self, grapheme_index: int) -> int:
        """Map a grapheme index to the string offset where it starts."""
        if grapheme_index < len(self._fragments):
            return self._fragments[max(0, grapheme_index)].start
        if grapheme_index > len(self._fragments):
            logger.error(f"Grapheme index {grapheme_index} out of range for line of "
                         f"{len(self._fragments)} graphemes")
        return len(self._string)

    def offset_to_grapheme(self, offset: int) -> Optional[int]:
        """Return the index of the first grapheme starting at or after ``offset``."""
        if offset > len(self._string):
            return None
        for index, fragment in enumerate(self._fragments):
            if fragment.start >= offset:
                return index
        return None

    def insert_char(self, character: str, at: int) -> None:
        offset = self.grapheme_offset(min(at, len(self._fragments)))
        self._string = self._string[:offset] + character + self._string[offset:]
        self._rebuild_fragments()

    def delete_char(self, at: int) -> None:
        if 0 <= at < len(self._fragments):
            fragment = self._fragments[at]
            self._string = self._string[:fragment.start] + self._string[fragment.end:]
            self._rebuild_fragments()

    def append(self, other: "Line") -> None:
        self._string += other._string
        self._rebuild_fragments()

    def split(self, at: int) -> "Line":
        """Keep graphemes ``[0, at)`` and return a new line with the rest."""
        offset = self.grapheme_offset(min(max(0, at), len(self._fragments)))
        remainder = self._string[offset:]
        self._string = self._string[:offset]
        self._rebuild_fragments()
        return Line(remainder)

    def search(self, query: str) -> list[int]:
        """Return grapheme indices of all non-overlapping matches of ``query``."""
        if not query:
            return []
        result = []
        offset = self._string.find(query)
        while offset != -1:
            grapheme_index = self.offset_to_grapheme(offset)
            if grapheme_index is not None:
                result.append(grapheme_index)
            offset = self._string.find(query, offset + len(query))
        return result

    def visible_graphemes(self, columns: range) -> str:
        return str(self.visible_substring(columns))

    def visible_substring(self, columns: range,
                          annotations: Optional[Iterable[Annotation]] = None) -> AnnotatedText:
        """Return the part of the line shown in the column window ``columns``.

        Fragments are walked from the rightmost rendered column so offsets
        to the left stay valid while the text is cut. A fragment straddling
        the right edge turns everything from it onward into the ellipsis
        marker; one straddling the left edge turns everything up to its end
        into the marker. Fragments outside the window are removed from the
        text, and visible fragments needing a substitute glyph get it.
        """
        left, right = columns.start, columns.stop
        if left >= right:
            return AnnotatedText()

        result = AnnotatedText(self._string)
        for annotation in annotations or ():
            result.add_annotation(annotation.annotation_type, annotation.start, annotation.end)

        fragment_start = self.width()
        for fragment in reversed(self._fragments):
            fragment_end = fragment_start
            fragment_start -= fragment.rendered_width.columns

            if fragment_start > right:
                continue

            if fragment_start < right < fragment_end:
                result.replace(fragment.start, len(result), EditorConstants.ELLIPSIS)
                continue
            if fragment_start == right:
                result.truncate_right_from(fragment.start)
                continue

            if fragment_end <= left:
                result.truncate_left_until(fragment.end)
                break
            if fragment_start < left < fragment_end:
                result.replace(0, fragment.end, EditorConstants.ELLIPSIS)
                break

            if fragment.replacement is not None:
                result.replace(fragment.start, fragment.end, fragment.replacement)

        return result

    def __str__(self) -> str:
        return self._string

    def __len__(self) -> int:
        return len(self._string)

    def __eq__(self, other) -> bool:
        if isinstance(other, Line):
            return self._string == other._string
        return NotImplemented

    def __repr__(self) -> str:
        return f"Line({self._string!r})"
