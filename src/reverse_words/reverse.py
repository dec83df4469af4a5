"""Lettering and word-order reversal.

Both operations are pure: tokenize, transform the tokens, join them with
single spaces and trim the spaces the tokenizer left next to punctuation.

Letters are reversed per code point, so combining marks and multi-code-point
emoji are not kept together as visual units.
"""

from __future__ import annotations

from enum import Enum

from reverse_words.reconstruct import join_tokens, trim_separators
from reverse_words.tokenizer import tokenize


class Mode(str, Enum):
    LETTERING = "lettering"
    ORDER = "order"


def reverse_lettering(text: str) -> str:
    """Reverse the letters of each word, keeping word order.

    >>> reverse_lettering("hello world!")
    'olleh dlrow!'
    """
    joined = join_tokens(token[::-1] for token in tokenize(text))
    return trim_separators(joined, leading=True)


def reverse_words_order(text: str) -> str:
    """Reverse the order of words, keeping each word's letters.

    >>> reverse_words_order("hello world!")
    '!world hello'
    """
    joined = join_tokens(reversed(tokenize(text)))
    return trim_separators(joined, leading=False)


def transform(text: str, mode: Mode) -> str:
    if mode == Mode.LETTERING:
        return reverse_lettering(text)
    if mode == Mode.ORDER:
        return reverse_words_order(text)
    raise ValueError(f"Unknown mode: {mode!r}")
