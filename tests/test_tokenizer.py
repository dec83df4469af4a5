import pytest

from reverse_words.reconstruct import join_tokens, trim_separators
from reverse_words.tokenizer import CharClass, char_class, is_separator, tokenize


def test_tokenize_isolates_punctuation():
    assert tokenize("Litwo! Ojczyzno moja!") == ["Litwo", "!", "Ojczyzno", "moja", "!"]


def test_tokenize_collapses_whitespace_runs():
    assert tokenize("a \t\n\r b") == ["a", "b"]


@pytest.mark.parametrize("text", ["", "     ", "\t\n\r"])
def test_tokenize_blank_input_gives_single_empty_token(text):
    assert tokenize(text) == [""]


def test_tokenize_splits_before_punctuation_only():
    # Only the position before a mark is split, so an opening mark stays on its word.
    assert tokenize("(hi)") == ["(hi", ")"]
    assert tokenize("!!!") == ["!", "!", "!"]
    assert tokenize("a-b") == ["a", "-b"]


def test_non_ascii_marks_are_word_characters():
    assert tokenize("¡Hola!") == ["¡Hola", "!"]
    assert char_class("¿") is CharClass.WORD


def test_char_class():
    assert char_class("!") is CharClass.PUNCTUATION
    assert char_class("\t") is CharClass.WHITESPACE
    assert char_class("x") is CharClass.WORD
    assert is_separator("-")
    assert not is_separator("7")


def test_trim_leading_attaches_punctuation_to_previous_word():
    assert trim_separators("olleh !", leading=True) == "olleh!"
    assert trim_separators("! ! !", leading=True) == "!!!"


def test_trim_trailing_attaches_punctuation_to_next_word():
    assert trim_separators("! hello", leading=False) == "!hello"
    assert trim_separators(", a b ! c", leading=False) == ",a b !c"


def test_trim_drops_doubled_joiner():
    assert trim_separators("a  b", leading=True) == "ab"


def test_trim_leaves_plain_words_alone():
    assert trim_separators("olleh dlrow", leading=True) == "olleh dlrow"
    assert trim_separators("world hello", leading=False) == "world hello"


@pytest.mark.parametrize("leading", [True, False])
@pytest.mark.parametrize(
    "tokens",
    [["hello", "!"], ["!", "hello"], ["!", "!", "!"], ["Ty", "!", "moja", ","], [""]],
)
def test_trim_is_idempotent(tokens, leading):
    once = trim_separators(join_tokens(tokens), leading=leading)
    assert trim_separators(once, leading=leading) == once
