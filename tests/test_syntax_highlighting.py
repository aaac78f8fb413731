"""Tests for the keyword-table syntax highlighters."""

from unittest.mock import patch

import pytest

from tildepad import syntax
from tildepad.annotated_text import AnnotationType
from tildepad.line import Line
from tildepad.syntax import (PythonSyntaxHighlighter, RustSyntaxHighlighter, is_numeric_literal,
                             is_valid_number)


def annotate(highlighter, text):
    highlighter.highlight(0, Line(text))
    return [(a.annotation_type, text[a.start:a.end]) for a in highlighter.get_annotations(0)]


def test_rust_keyword_and_number():
    highlighter = RustSyntaxHighlighter()
    highlighter.highlight(0, Line("    let x = 42;"))
    annotations = highlighter.get_annotations(0)
    assert [(a.annotation_type, a.start, a.end) for a in annotations] == [
        (AnnotationType.KEYWORD, 4, 7),
        (AnnotationType.NUMBER, 12, 14),
    ]


def test_rust_types_and_known_values():
    assert annotate(RustSyntaxHighlighter(), "let v: Vec<u8> = Some(true);") == [
        (AnnotationType.KEYWORD, "let"),
        (AnnotationType.TYPE, "Vec"),
        (AnnotationType.TYPE, "u8"),
        (AnnotationType.KNOWN_VALUE, "Some"),
        (AnnotationType.KNOWN_VALUE, "true"),
    ]


def test_rust_char_literal():
    assert annotate(RustSyntaxHighlighter(), "let c = 'a';") == [
        (AnnotationType.KEYWORD, "let"),
        (AnnotationType.CHAR, "'a'"),
    ]


def test_rust_escaped_char_literal():
    assert annotate(RustSyntaxHighlighter(), "'\\n'") == [(AnnotationType.CHAR, "'\\n'")]


def test_rust_lifetime_specifier():
    assert annotate(RustSyntaxHighlighter(), "&'static str") == [
        (AnnotationType.LIFETIME_SPECIFIER, "'static"),
        (AnnotationType.TYPE, "str"),
    ]


def test_rust_words_inside_identifiers_are_not_keywords():
    assert annotate(RustSyntaxHighlighter(), "letter if_x") == []


def test_rust_float_is_one_number():
    assert annotate(RustSyntaxHighlighter(), "x = 1.5e10;") == [(AnnotationType.NUMBER, "1.5e10")]


def test_unknown_line_has_no_annotations():
    highlighter = RustSyntaxHighlighter()
    assert highlighter.get_annotations(3) is None


def test_python_highlighting():
    assert annotate(PythonSyntaxHighlighter(), "def f(x=None): return 1") == [
        (AnnotationType.KEYWORD, "def"),
        (AnnotationType.KNOWN_VALUE, "None"),
        (AnnotationType.KEYWORD, "return"),
        (AnnotationType.NUMBER, "1"),
    ]


def test_python_builtin_types():
    assert annotate(PythonSyntaxHighlighter(), "x: int = len(str(y))") == [
        (AnnotationType.TYPE, "int"),
        (AnnotationType.TYPE, "str"),
    ]


@pytest.mark.parametrize("word", ["0", "42", "1_000", "3.14", "1e5", "1.5e10", "0x1F", "0b101", "0o17"])
def test_valid_numbers(word):
    assert is_valid_number(word)


@pytest.mark.parametrize("word", ["", "x1", "1.", "1.2.3", "1e", "1e5e5", "1__0", "12a", "0x", "0b102", "0xG"])
def test_invalid_numbers(word):
    assert not is_valid_number(word)


def test_numeric_literal_needs_a_digit():
    assert not is_numeric_literal("0x")
    assert is_numeric_literal("0XFF")


def test_long_line_is_segmented_once():
    text = "let x = 42; " * 200
    with patch.object(syntax, "word_bound_indices", wraps=syntax.word_bound_indices) as segment:
        annotations = annotate(RustSyntaxHighlighter(), text)
    assert segment.call_count == 1
    assert annotations == [(AnnotationType.KEYWORD, "let"), (AnnotationType.NUMBER, "42")] * 200
