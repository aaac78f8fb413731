"""Strings carrying highlight annotations over string offsets.

An AnnotatedText keeps a string and a list of half-open ``[start, end)``
ranges tagged with an AnnotationType. The text itself is never styled;
renderers walk the parts produced by iteration and map each type to
colors. Splicing the text through ``replace`` re-projects every annotation
so highlighting computed before an edit stays aligned after it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Optional


class AnnotationType(Enum):
    """Categories a renderer knows how to style."""
    MATCH = "match"
    SELECTED_MATCH = "selected_match"
    NUMBER = "number"
    KEYWORD = "keyword"
    TYPE = "type"
    KNOWN_VALUE = "known_value"
    CHAR = "char"
    LIFETIME_SPECIFIER = "lifetime_specifier"


@dataclass
class Annotation:
    annotation_type: AnnotationType
    start: int
    end: int


class AnnotatedTextPart(NamedTuple):
    text: str
    annotation_type: Optional[AnnotationType]


class AnnotatedText:
    def __init__(self, text: str = ""):
        self._text = text
        self._annotations: list[Annotation] = []

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return tuple(self._annotations)

    def add_annotation(self, annotation_type: AnnotationType, start: int, end: int) -> None:
        """Record an annotation; ranges are validated lazily."""
        self._annotations.append(Annotation(annotation_type, start, end))

    def replace(self, start: int, end: int, new_text: str) -> None:
        """Replace ``text[start:end]`` with ``new_text`` and re-project annotations.

        ``end`` is clamped to the text length and an inverted range is a
        no-op. Each annotation boundary is moved independently:

        - at or after the old ``end`` it shifts by the length difference;
        - inside ``[start, end)`` it is pulled toward the new span size,
          clamped to ``start`` when the span shrank and to ``end`` when it grew;
        - before ``start`` it stays put.

        Annotations left empty or starting past the end of the new text are
        dropped afterwards.
        """
        end = min(end, len(self._text))
        if start > end:
            return
        self._text = self._text[:start] + new_text + self._text[end:]

        replaced_len = end - start
        shortened = len(new_text) < replaced_len
        len_diff = abs(len(new_text) - replaced_len)
        if len_diff == 0:
            return

        def project(boundary: int) -> int:
            if boundary >= end:
                return boundary - len_diff if shortened else boundary + len_diff
            if boundary >= start:
                if shortened:
                    return max(start, boundary - len_diff)
                return min(end, boundary + len_diff)
            return boundary

        for annotation in self._annotations:
            annotation.start = project(annotation.start)
            annotation.end = project(annotation.end)

        text_len = len(self._text)
        self._annotations = [
            annotation for annotation in self._annotations
            if annotation.start < annotation.end and annotation.start < text_len
        ]

    def truncate_left_until(self, offset: int) -> None:
        self.replace(0, offset, "")

    def truncate_right_from(self, offset: int) -> None:
        self.replace(offset, len(self._text), "")

    def parts(self) -> Iterator[AnnotatedTextPart]:
        """Yield consecutive parts covering the whole text.

        At each offset the most recently added annotation covering it wins
        and yields one part up to its end. Unannotated text runs until the
        next annotation start.
        """
        text_len = len(self._text)
        current = 0
        while current < text_len:
            covering = None
            for annotation in self._annotations:
                if annotation.start <= current < annotation.end:
                    covering = annotation
            if covering is not None:
                end = min(covering.end, text_len)
                yield AnnotatedTextPart(self._text[current:end], covering.annotation_type)
                current = end
                continue

            end = text_len
            for annotation in self._annotations:
                if current < annotation.start < end and annotation.start < annotation.end:
                    end = annotation.start
            yield AnnotatedTextPart(self._text[current:end], None)
            current = end

    def __iter__(self) -> Iterator[AnnotatedTextPart]:
        return self.parts()

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"AnnotatedText({self._text!r}, {self._annotations!r})"
