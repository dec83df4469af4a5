"""Split text into word and punctuation tokens."""

from __future__ import annotations

from enum import Enum
import re
import string

PUNCTUATION = frozenset(string.punctuation)
WHITESPACE = frozenset(" \t\n\x0b\x0c\r")
SEPARATORS = PUNCTUATION | WHITESPACE

_SEPARATOR_CLASS = "[" + re.escape(string.punctuation) + r" \t\n\x0b\x0c\r]"
SEPARATOR_RE = re.compile(_SEPARATOR_CLASS)
WHITESPACE_RUN_RE = re.compile(r"[ \t\n\x0b\x0c\r]+")


class CharClass(str, Enum):
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    WORD = "word"


def char_class(ch: str) -> CharClass:
    """Classify a single character."""
    if ch in PUNCTUATION:
        return CharClass.PUNCTUATION
    if ch in WHITESPACE:
        return CharClass.WHITESPACE
    return CharClass.WORD


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def tokenize(text: str) -> list[str]:
    """Split text into tokens, keeping each punctuation mark as its own token.

    A space is inserted before every separator so punctuation ends up
    isolated, then the result is split on whitespace runs. Empty or
    whitespace-only input yields ``[""]``.
    """
    spaced = SEPARATOR_RE.sub(r" \g<0>", text).strip()
    return WHITESPACE_RUN_RE.split(spaced)
