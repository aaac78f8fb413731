"""Per-render highlighting of visible lines.

A Highlighter is built fresh for every draw of the view. It combines the
syntax highlighter for the document's file type with search-match
highlighting, and caches annotations per line index for that one pass.
"""

from typing import Optional

from .annotated_text import Annotation, AnnotationType
from .file_info import FileType
from .line import Line
from .syntax import PythonSyntaxHighlighter, RustSyntaxHighlighter, SyntaxHighlighter


class SearchResultHighlighter(SyntaxHighlighter):
    """Marks every match of the query, and the selected match separately."""

    def __init__(self, matched_word: str, selected_match=None):
        super().__init__()
        self.matched_word = matched_word
        self.selected_match = selected_match

    def _highlight_matched_words(self, line: Line, result: list[Annotation],
                                 search_results: Optional[list[int]]) -> None:
        if not self.matched_word or not search_results:
            return
        for grapheme_idx in search_results:
            start = line.grapheme_offset(grapheme_idx)
            result.append(Annotation(AnnotationType.MATCH, start, start + len(self.matched_word)))

    def _highlight_selected_match(self, line: Line, result: list[Annotation]) -> None:
        if not self.matched_word or self.selected_match is None:
            return
        start = line.grapheme_offset(self.selected_match.grapheme_index)
        result.append(Annotation(AnnotationType.SELECTED_MATCH, start, start + len(self.matched_word)))

    def highlight(self, line_idx: int, line: Line, search_results: Optional[list[int]] = None) -> None:
        result: list[Annotation] = []
        self._highlight_matched_words(line, result, search_results)
        if self.selected_match is not None and self.selected_match.line_index == line_idx:
            self._highlight_selected_match(line, result)
        self._highlights[line_idx] = result


def create_syntax_highlighter(file_type: FileType) -> Optional[SyntaxHighlighter]:
    if file_type is FileType.RUST:
        return RustSyntaxHighlighter()
    if file_type is FileType.PYTHON:
        return PythonSyntaxHighlighter()
    return None


class Highlighter:
    def __init__(self, file_type: FileType, matched_word: Optional[str] = None, selected_match=None):
        self.syntax_highlighter = create_syntax_highlighter(file_type)
        self.search_result_highlighter = (
            SearchResultHighlighter(matched_word, selected_match)
            if matched_word is not None else None
        )

    def highlight(self, line_idx: int, line: Line, search_results: Optional[list[int]] = None) -> None:
        if self.syntax_highlighter is not None:
            self.syntax_highlighter.highlight(line_idx, line, search_results)
        if self.search_result_highlighter is not None:
            self.search_result_highlighter.highlight(line_idx, line, search_results)

    def get_annotations(self, line_idx: int) -> list[Annotation]:
        """Syntax annotations first, then search annotations."""
        result = []
        for highlighter in (self.syntax_highlighter, self.search_result_highlighter):
            if highlighter is not None:
                result.extend(highlighter.get_annotations(line_idx) or ())
        return result
