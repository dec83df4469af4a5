"""Rebuild a string from transformed tokens."""

from __future__ import annotations

from typing import Iterable

from reverse_words.tokenizer import WHITESPACE, is_separator

TOKEN_JOINER = " "


def join_tokens(tokens: Iterable[str]) -> str:
    return TOKEN_JOINER.join(tokens)


def trim_separators(text: str, leading: bool) -> str:
    """Drop the joiner space next to each separator.

    With ``leading=True`` every ``" X"`` pair becomes ``X``; otherwise every
    ``"X "`` pair does. ``X`` is any separator and a whitespace ``X`` is
    dropped along with the joiner. Pairs are consumed left to right without
    overlapping.
    """
    out: list[str] = []
    i = 0
    size = len(text)
    while i < size:
        if i + 1 < size:
            first, second = text[i], text[i + 1]
            if leading and first == TOKEN_JOINER and is_separator(second):
                out.append(_strip_separator(second))
                i += 2
                continue
            if not leading and is_separator(first) and second == TOKEN_JOINER:
                out.append(_strip_separator(first))
                i += 2
                continue
        out.append(text[i])
        i += 1
    return "".join(out)


def _strip_separator(ch: str) -> str:
    return "" if ch in WHITESPACE else ch
