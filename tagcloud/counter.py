"""
counter.py - Word Frequencies

Folds tokens to lowercase and counts every token that is a word
rather than a separator run.
"""

from collections import Counter

from tagcloud.tokenizer import is_separator, tokenize_line


def count_words(lines, counts=None):
    """
    Accumulate word occurrences from an iterable of text lines.

    Lines are tokenized independently, so no word spans two lines.
    Errors raised while iterating lines propagate to the caller.
    Runtime Complexity: O(N) where N is the total number of characters.

    Args:
        lines: iterable of strings (an open text file works)
        counts: existing Counter to update in place; a new one if None

    Returns:
        Counter mapping lowercase word -> occurrence count
    """
    if counts is None:
        counts = Counter()
    for line in lines:
        for token in tokenize_line(line):
            word = token.lower()
            if not is_separator(word[0]):
                counts[word] += 1
    return counts


def merge_counts(*mappings):
    """Sum several word -> count mappings into a new Counter."""
    merged = Counter()
    for mapping in mappings:
        for word, count in mapping.items():
            merged[word] += count
    return merged
