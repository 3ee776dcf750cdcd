"""
tokenizer.py - Word / Separator Splitting

Splits a line into maximal runs of separator characters or of
non-separator characters. Substrings are returned exactly as they
appear, so joining the tokens of a line gives the line back.
"""

SEPARATORS = frozenset(" \t\n\r,-.!?[]';:/()")


def is_separator(char):
    return char in SEPARATORS


def next_word_or_separator(text, position):
    """
    Return the word or separator run of text starting at position.

    The run's kind is decided by text[position]; it extends until the
    kind changes or the text ends.
    Runtime Complexity: O(k) where k is the length of the returned run.

    Raises:
        IndexError: if position is outside 0 <= position < len(text)
    """
    if not 0 <= position < len(text):
        raise IndexError(f"position {position} out of range for text of length {len(text)}")

    separator = is_separator(text[position])
    end = position + 1
    while end < len(text) and is_separator(text[end]) == separator:
        end += 1
    return text[position:end]


def tokenize_line(line):
    """
    Yield the successive tokens of a single line, left to right.
    Runtime Complexity: O(n) where n is the length of the line.
    """
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position)
        yield token
        position += len(token)
