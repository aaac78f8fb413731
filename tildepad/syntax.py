"""Keyword-table syntax highlighters.

Each highlighter segments a line into word-bound tokens once and, at every
token start, tries a fixed list of annotators against the tokens from there
on. The first one that matches wins, and tokens it covers are skipped.
"""

import builtins
import keyword
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .annotated_text import Annotation, AnnotationType
from .line import Line
from .words import word_bound_indices

Tokens = list[tuple[int, str]]
Annotator = Callable[[Tokens, int], Optional[Annotation]]


class SyntaxHighlighter(ABC):
    """Computes and caches annotations per line index."""

    def __init__(self):
        self._highlights: dict[int, list[Annotation]] = {}

    @abstractmethod
    def highlight(self, line_idx: int, line: Line, search_results: Optional[list[int]] = None) -> None:
        pass

    def get_annotations(self, line_idx: int) -> Optional[list[Annotation]]:
        return self._highlights.get(line_idx)


RUST_KEYWORDS = frozenset([
    "break", "const", "continue", "crate", "else", "enum", "extern",
    "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod", "move",
    "mut", "pub", "ref", "return", "self", "Self", "static", "struct",
    "super", "trait", "type", "unsafe", "use", "where", "while", "async",
    "await", "dyn", "abstract", "become", "box", "do", "final", "macro",
    "override", "priv", "typeof", "unsized", "virtual", "yield", "try",
    "macro_rules", "union",
])

RUST_TYPES = frozenset([
    "i8", "i16", "i32", "i64", "i128", "isize", "u8", "u16", "u32", "u64",
    "u128", "usize", "f32", "f64", "bool", "char", "Option", "Result",
    "String", "str", "Vec", "HashMap",
])

RUST_KNOWN_VALUES = frozenset(["Some", "None", "true", "false", "Ok", "Err"])

PYTHON_KNOWN_VALUES = frozenset(["True", "False", "None", "Ellipsis", "NotImplemented"])

PYTHON_KEYWORDS = frozenset(
    word for word in keyword.kwlist + list(keyword.softkwlist)
    if word not in PYTHON_KNOWN_VALUES and word != "_"
)

PYTHON_TYPES = frozenset(
    name for name, value in vars(builtins).items()
    if isinstance(value, type) and not issubclass(value, BaseException)
    and not name.startswith("_")
)

_RADIX_DIGITS = {"b": "01", "o": "01234567", "x": "0123456789abcdefABCDEF"}


def is_numeric_literal(word: str) -> bool:
    """``0b``/``0o``/``0x`` followed by at least one digit of that base."""
    if len(word) < 3 or word[0] != "0":
        return False
    digits = _RADIX_DIGITS.get(word[1].lower())
    if digits is None:
        return False
    return all(ch in digits for ch in word[2:])


def is_valid_number(word: str) -> bool:
    if not word:
        return False
    if is_numeric_literal(word):
        return True
    if not ("0" <= word[0] <= "9"):
        return False

    has_dot = False
    has_e = False
    prev_was_digit = True
    for ch in word[1:]:
        if "0" <= ch <= "9":
            prev_was_digit = True
        elif ch == "_":
            if not prev_was_digit:
                return False
            prev_was_digit = False
        elif ch == ".":
            if has_dot or has_e or not prev_was_digit:
                return False
            has_dot = True
            prev_was_digit = False
        elif ch in "eE":
            if has_e or not prev_was_digit:
                return False
            has_e = True
            prev_was_digit = False
        else:
            return False
    return prev_was_digit


def annotate_next_word(tokens: Tokens, index: int, annotation_type: AnnotationType,
                       validator: Callable[[str], bool]) -> Optional[Annotation]:
    start, word = tokens[index]
    if validator(word):
        return Annotation(annotation_type, start, start + len(word))
    return None


def annotate_number(tokens: Tokens, index: int) -> Optional[Annotation]:
    return annotate_next_word(tokens, index, AnnotationType.NUMBER, is_valid_number)


def annotate_char(tokens: Tokens, index: int) -> Optional[Annotation]:
    """A quote, an optional backslash, one token and a closing quote."""
    start, word = tokens[index]
    if word != "'":
        return None
    position = index + 1
    if position < len(tokens) and tokens[position][1] == "\\":
        position += 1
    position += 1
    if position < len(tokens) and tokens[position][1] == "'":
        return Annotation(AnnotationType.CHAR, start, tokens[position][0] + 1)
    return None


def annotate_lifetime_specifier(tokens: Tokens, index: int) -> Optional[Annotation]:
    start, word = tokens[index]
    if word == "'" and index + 1 < len(tokens):
        next_start, next_word = tokens[index + 1]
        return Annotation(AnnotationType.LIFETIME_SPECIFIER, start, next_start + len(next_word))
    return None


def table_annotator(annotation_type: AnnotationType, words: frozenset) -> Annotator:
    return lambda tokens, index: annotate_next_word(tokens, index, annotation_type, words.__contains__)


class TokenSyntaxHighlighter(SyntaxHighlighter):
    annotators: tuple[Annotator, ...] = ()

    def highlight(self, line_idx: int, line: Line, search_results: Optional[list[int]] = None) -> None:
        tokens = word_bound_indices(str(line))
        result = []
        covered_until = 0
        for index, (start, _) in enumerate(tokens):
            if start < covered_until:
                continue
            for annotator in self.annotators:
                annotation = annotator(tokens, index)
                if annotation is not None:
                    result.append(annotation)
                    covered_until = annotation.end
                    break
        self._highlights[line_idx] = result


class RustSyntaxHighlighter(TokenSyntaxHighlighter):
    annotators = (
        annotate_char,
        annotate_lifetime_specifier,
        annotate_number,
        table_annotator(AnnotationType.KEYWORD, RUST_KEYWORDS),
        table_annotator(AnnotationType.TYPE, RUST_TYPES),
        table_annotator(AnnotationType.KNOWN_VALUE, RUST_KNOWN_VALUES),
    )


class PythonSyntaxHighlighter(TokenSyntaxHighlighter):
    annotators = (
        annotate_number,
        table_annotator(AnnotationType.KEYWORD, PYTHON_KEYWORDS),
        table_annotator(AnnotationType.TYPE, PYTHON_TYPES),
        table_annotator(AnnotationType.KNOWN_VALUE, PYTHON_KNOWN_VALUES),
    )
