"""Unicode default word-boundary segmentation.

Implements the word-boundary rules of UAX #29 over grapheme clusters, each
cluster classified by its first code point. The result covers the input
exactly: every character belongs to one token, including whitespace and
punctuation tokens.
"""

import unicodedata
from enum import Enum, auto

import grapheme


class WordBreak(Enum):
    ALETTER = auto()
    NUMERIC = auto()
    KATAKANA = auto()
    EXTEND_NUM_LET = auto()
    MID_LETTER = auto()
    MID_NUM = auto()
    MID_NUM_LET = auto()
    SINGLE_QUOTE = auto()
    WSEG_SPACE = auto()
    NEWLINE = auto()
    FORMAT = auto()
    OTHER = auto()


_MID_LETTER = frozenset(":··՟״‧︓﹕：")
_MID_NUM = frozenset(",;;։،؍٬߸⁄︐︔﹐﹔，；")
_MID_NUM_LET = frozenset(".‘’․﹒＇．")
_NEWLINES = frozenset("\r\n\x0b\x0c\x85\u2028\u2029")
_NO_BREAK_SPACES = frozenset("\u00a0\u2007\u202f")

_AHLETTER_LIKE = (WordBreak.ALETTER,)
_MID_LETTER_LIKE = (WordBreak.MID_LETTER, WordBreak.MID_NUM_LET, WordBreak.SINGLE_QUOTE)
_MID_NUM_LIKE = (WordBreak.MID_NUM, WordBreak.MID_NUM_LET, WordBreak.SINGLE_QUOTE)
_EXTENDABLE = (WordBreak.ALETTER, WordBreak.NUMERIC, WordBreak.KATAKANA, WordBreak.EXTEND_NUM_LET)


def _is_katakana(ch: str) -> bool:
    return "゠" <= ch <= "ヿ" or "ㇰ" <= ch <= "ㇿ" or "ｦ" <= ch <= "ﾟ"


def _is_ideographic(ch: str) -> bool:
    return ("぀" <= ch <= "ゟ" or "㐀" <= ch <= "䶿"
            or "一" <= ch <= "鿿" or "豈" <= ch <= "﫿")


def classify(cluster: str) -> WordBreak:
    ch = cluster[0]
    if ch in _NEWLINES:
        return WordBreak.NEWLINE
    if ch == "'":
        return WordBreak.SINGLE_QUOTE
    if ch in _MID_LETTER:
        return WordBreak.MID_LETTER
    if ch in _MID_NUM:
        return WordBreak.MID_NUM
    if ch in _MID_NUM_LET:
        return WordBreak.MID_NUM_LET
    if _is_katakana(ch):
        return WordBreak.KATAKANA
    category = unicodedata.category(ch)
    if category == "Nd":
        return WordBreak.NUMERIC
    if category == "Pc":
        return WordBreak.EXTEND_NUM_LET
    if category == "Zs" and ch not in _NO_BREAK_SPACES:
        return WordBreak.WSEG_SPACE
    if category == "Cf" and ch not in "\u200c\u200d":
        return WordBreak.FORMAT
    if ch.isalpha() and not _is_ideographic(ch):
        return WordBreak.ALETTER
    return WordBreak.OTHER


def _breaks(before_left, left, right, after_right) -> bool:
    if left is WordBreak.NEWLINE or right is WordBreak.NEWLINE:
        return True
    if left is WordBreak.WSEG_SPACE and right is WordBreak.WSEG_SPACE:
        return False
    if left in _AHLETTER_LIKE and right in _AHLETTER_LIKE:
        return False
    if left in _AHLETTER_LIKE and right in _MID_LETTER_LIKE and after_right in _AHLETTER_LIKE:
        return False
    if before_left in _AHLETTER_LIKE and left in _MID_LETTER_LIKE and right in _AHLETTER_LIKE:
        return False
    if left is WordBreak.NUMERIC and right is WordBreak.NUMERIC:
        return False
    if left in _AHLETTER_LIKE and right is WordBreak.NUMERIC:
        return False
    if left is WordBreak.NUMERIC and right in _AHLETTER_LIKE:
        return False
    if before_left is WordBreak.NUMERIC and left in _MID_NUM_LIKE and right is WordBreak.NUMERIC:
        return False
    if left is WordBreak.NUMERIC and right in _MID_NUM_LIKE and after_right is WordBreak.NUMERIC:
        return False
    if left is WordBreak.KATAKANA and right is WordBreak.KATAKANA:
        return False
    if left in _EXTENDABLE and right is WordBreak.EXTEND_NUM_LET:
        return False
    if left is WordBreak.EXTEND_NUM_LET and right in _EXTENDABLE:
        return False
    return True


def word_bound_indices(text: str) -> list[tuple[int, str]]:
    """Split ``text`` at word boundaries, returning ``(offset, token)`` pairs."""
    clusters = list(grapheme.graphemes(text))
    if not clusters:
        return []
    classes = [classify(cluster) for cluster in clusters]
    offsets = []
    offset = 0
    for cluster in clusters:
        offsets.append(offset)
        offset += len(cluster)

    # Format characters attach to whatever precedes them and are skipped
    # when looking at neighbours.
    significant = [
        i for i, cls in enumerate(classes)
        if i == 0 or cls is not WordBreak.FORMAT or classes[i - 1] is WordBreak.NEWLINE
    ]

    starts = [0]
    for n in range(1, len(significant)):
        i = significant[n]
        left = classes[significant[n - 1]]
        before_left = classes[significant[n - 2]] if n >= 2 else None
        after_right = classes[significant[n + 1]] if n + 1 < len(significant) else None
        if _breaks(before_left, left, classes[i], after_right):
            starts.append(i)

    tokens = []
    for k, start in enumerate(starts):
        end = starts[k + 1] if k + 1 < len(starts) else len(clusters)
        token_start = offsets[start]
        token_end = offsets[end] if end < len(clusters) else len(text)
        tokens.append((token_start, text[token_start:token_end]))
    return tokens


def split_word_bounds(text: str) -> list[str]:
    return [token for _, token in word_bound_indices(text)]
