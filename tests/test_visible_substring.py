"""Tests for cutting lines to a window of screen columns."""

from tildepad.annotated_text import Annotation, AnnotationType
from tildepad.constants import EditorConstants
from tildepad.line import Line

ELLIPSIS = EditorConstants.ELLIPSIS


def test_window_from_start():
    assert Line("hello world").visible_graphemes(range(0, 5)) == "hello"


def test_window_in_the_middle():
    assert Line("hello world").visible_graphemes(range(6, 11)) == "world"


def test_window_wider_than_line():
    assert Line("abc").visible_graphemes(range(0, 80)) == "abc"


def test_empty_window():
    assert Line("abc").visible_graphemes(range(2, 2)) == ""
    assert str(Line("abc").visible_substring(range(3, 1))) == ""


def test_long_ascii_line_is_cut_without_marker():
    """Half-width graphemes never straddle an edge, so no marker appears."""
    assert Line("A" * 100).visible_graphemes(range(0, 10)) == "A" * 10


def test_long_ascii_line_in_five_columns():
    """A window ending between two half-width graphemes is a clean cut."""
    visible = Line("A" * 100).visible_graphemes(range(0, 5))
    assert visible == "A" * 5
    assert ELLIPSIS not in visible


def test_wide_grapheme_on_right_edge_becomes_ellipsis():
    assert Line("a日b").visible_graphemes(range(0, 2)) == "a" + ELLIPSIS


def test_wide_grapheme_on_left_edge_becomes_ellipsis():
    assert Line("a日b").visible_graphemes(range(2, 4)) == ELLIPSIS + "b"


def test_tab_is_shown_as_space():
    assert Line("a\tb").visible_graphemes(range(0, 3)) == "a b"


def test_annotations_follow_the_cut():
    line = Line("let x = 42;")
    result = line.visible_substring(range(4, 11), [Annotation(AnnotationType.NUMBER, 8, 10)])
    assert str(result) == "x = 42;"
    assert [(part.text, part.annotation_type) for part in result] == [
        ("x = ", None),
        ("42", AnnotationType.NUMBER),
        (";", None),
    ]


def test_annotation_outside_window_is_dropped():
    line = Line("abc def")
    result = line.visible_substring(range(4, 7), [Annotation(AnnotationType.KEYWORD, 0, 3)])
    assert str(result) == "def"
    assert result.annotations == ()


def test_input_annotations_are_not_modified():
    annotation = Annotation(AnnotationType.NUMBER, 8, 10)
    Line("let x = 42;").visible_substring(range(4, 11), [annotation])
    assert (annotation.start, annotation.end) == (8, 10)
