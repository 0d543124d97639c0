"""
Letter statistics over a word set (recomputed every turn).

- get_letter_count       : how often each still-unknown letter occurs
- get_letter_distribution: per-position letter histograms

Letter order is by descending count, ties broken by ascending letter, so the
same inputs always produce the same order.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple


def get_letter_count(words: Iterable[str], pattern: str,
                     wildcard_letters: Iterable[str]) -> Tuple[Counter, str]:
    """
    Count every letter occurrence that is not already known (in the pattern
    or among the wildcard letters). Repeats inside a word count each time.

    Returns:
      (counts, order) where `order` is a string of letters, most common first.
    """
    known = set(pattern) | set(wildcard_letters)
    counts: Counter = Counter()
    for w in words:
        for ch in w:
            if ch not in known:
                counts[ch] += 1

    order = "".join(sorted(counts, key=lambda ch: (-counts[ch], ch)))
    return counts, order


def get_letter_distribution(words: Iterable[str], word_length: int) -> List[Counter]:
    """
    counts[pos][letter] over `words`. Empty input gives [] (not a list of
    empty counters); words of the wrong length are skipped.
    """
    sized = [w for w in words if len(w) == word_length]
    if not sized:
        return []

    dist = [Counter() for _ in range(word_length)]
    for w in sized:
        for i, ch in enumerate(w):
            dist[i][ch] += 1
    return dist
