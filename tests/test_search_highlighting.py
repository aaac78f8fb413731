"""Tests for search-match highlighting and the composite highlighter."""

from tildepad.annotated_text import AnnotationType
from tildepad.document import Location
from tildepad.file_info import FileType
from tildepad.highlighter import Highlighter, SearchResultHighlighter, create_syntax_highlighter
from tildepad.line import Line
from tildepad.syntax import PythonSyntaxHighlighter, RustSyntaxHighlighter


def spans(annotations):
    return [(a.annotation_type, a.start, a.end) for a in annotations]


def test_matches_use_string_offsets():
    line = Line("e\u0301 abc abc")
    highlighter = SearchResultHighlighter("abc")
    highlighter.highlight(0, line, line.search("abc"))
    assert spans(highlighter.get_annotations(0)) == [
        (AnnotationType.MATCH, 3, 6),
        (AnnotationType.MATCH, 7, 10),
    ]


def test_selected_match_only_on_its_line():
    line = Line("abc abc")
    highlighter = SearchResultHighlighter("abc", Location(1, 4))
    highlighter.highlight(0, line, line.search("abc"))
    highlighter.highlight(1, line, line.search("abc"))
    assert AnnotationType.SELECTED_MATCH not in [a.annotation_type for a in highlighter.get_annotations(0)]
    assert spans(highlighter.get_annotations(1))[-1] == (AnnotationType.SELECTED_MATCH, 4, 7)


def test_empty_query_highlights_nothing():
    line = Line("abc")
    highlighter = SearchResultHighlighter("", Location(0, 0))
    highlighter.highlight(0, line, [0])
    assert highlighter.get_annotations(0) == []


def test_create_syntax_highlighter():
    assert isinstance(create_syntax_highlighter(FileType.RUST), RustSyntaxHighlighter)
    assert isinstance(create_syntax_highlighter(FileType.PYTHON), PythonSyntaxHighlighter)
    assert create_syntax_highlighter(FileType.TEXT) is None


def test_syntax_annotations_come_before_search_annotations():
    line = Line("let x = 1;")
    highlighter = Highlighter(FileType.RUST, "x", Location(0, 4))
    highlighter.highlight(0, line, line.search("x"))
    assert [a.annotation_type for a in highlighter.get_annotations(0)] == [
        AnnotationType.KEYWORD,
        AnnotationType.NUMBER,
        AnnotationType.MATCH,
        AnnotationType.SELECTED_MATCH,
    ]


def test_plain_text_without_search_has_no_annotations():
    line = Line("let x = 1;")
    highlighter = Highlighter(FileType.TEXT)
    highlighter.highlight(0, line)
    assert highlighter.get_annotations(0) == []
