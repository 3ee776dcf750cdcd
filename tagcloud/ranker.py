"""
ranker.py - Top-N Selection and Font Scaling

Selects the most frequent words by numerical order, then hands them
back in alphabetical order with a font size scaled linearly between
min_font and max_font. The scale spans only the selected words.
"""

import heapq
from typing import NamedTuple

from tagcloud.errors import InvalidCount

MIN_FONT = 11
MAX_FONT = 48


class RankedEntry(NamedTuple):
    word: str
    count: int
    font_size: int


def numerical_order(item):
    """Key for (word, count): descending count, then word ignoring case."""
    word, count = item
    return (-count, word.lower())


def alphabetical_order(item):
    """Key for (word, count): word ignoring case, then descending count."""
    word, count = item
    return (word.lower(), -count)


def top_n(items, n, key):
    """
    Return the first n items under key, in key order.

    Equivalent to sorted(items, key=key)[:n] without sorting
    the whole collection.
    Runtime Complexity: O(m log n) for m items.
    """
    return heapq.nsmallest(n, items, key=key)


def font_size(count, smallest, largest, min_font=MIN_FONT, max_font=MAX_FONT):
    """
    Map count in [smallest, largest] onto [min_font, max_font].

    Uses truncating integer division. When every selected word has
    the same count the largest font is used.
    """
    if smallest == largest:
        return max_font
    return min_font + (max_font - min_font) * (count - smallest) // (largest - smallest)


def rank(counts, n, min_font=MIN_FONT, max_font=MAX_FONT):
    """
    Build the tag cloud entries for the n most frequent words.

    Args:
        counts: mapping word -> count (left unmodified)
        n: requested number of words, n >= 0
        min_font, max_font: font size range, min_font <= max_font

    Returns:
        list of RankedEntry of length min(n, len(counts)),
        in alphabetical order

    Raises:
        InvalidCount: if n is negative
        ValueError: if min_font > max_font
    """
    if n < 0:
        raise InvalidCount(f"Word count must be non-negative, got {n}.")
    if min_font > max_font:
        raise ValueError(f"min_font ({min_font}) is larger than max_font ({max_font}).")

    selected = top_n(counts.items(), min(n, len(counts)), numerical_order)
    if not selected:
        return []

    # Selection is in numerical order: first is largest, last is smallest
    largest = selected[0][1]
    smallest = selected[-1][1]

    return [
        RankedEntry(word, count, font_size(count, smallest, largest, min_font, max_font))
        for word, count in sorted(selected, key=alphabetical_order)
    ]
