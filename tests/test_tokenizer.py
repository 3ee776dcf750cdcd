# tests/test_tokenizer.py
import pytest
from tagcloud.tokenizer import SEPARATORS, is_separator, next_word_or_separator, tokenize_line

LINES = [
    "the cat and the dog. The CAT sat.",
    "  leading spaces, (parens) [brackets] don't-stop!",
    "word",
    "?!.,",
    "tab\tseparated\r\n",
    "http://example.com/path;x:y",
]


def test_word_run():
    assert next_word_or_separator("hello, world", 0) == "hello"


def test_separator_run():
    assert next_word_or_separator("hello, world", 5) == ", "


def test_run_to_end_of_line():
    assert next_word_or_separator("hello, world", 7) == "world"


def test_apostrophe_is_separator():
    assert list(tokenize_line("don't")) == ["don", "'", "t"]


def test_separator_set():
    for char in " \t\n\r,-.!?[]';:/()":
        assert is_separator(char)
    for char in "aZ09_\"#&*":
        assert not is_separator(char)
    assert len(SEPARATORS) == 17


@pytest.mark.parametrize("position", [-1, 5])
def test_position_out_of_range(position):
    with pytest.raises(IndexError):
        next_word_or_separator("hello", position)


@pytest.mark.parametrize("line", LINES)
def test_tokens_reconstruct_line(line):
    assert "".join(tokenize_line(line)) == line


@pytest.mark.parametrize("line", LINES)
def test_every_position_gives_maximal_homogeneous_run(line):
    for position in range(len(line)):
        token = next_word_or_separator(line, position)
        kinds = {is_separator(c) for c in token}
        assert len(kinds) == 1
        end = position + len(token)
        if end < len(line):
            assert is_separator(line[end]) != is_separator(token[0])


def test_empty_line_has_no_tokens():
    assert list(tokenize_line("")) == []
