"""
Candidate filtering against a constraint model.

A word matches iff:
  - its length equals the pattern length (and the pattern is non-empty)
  - it contains no excluded letter
  - it contains the wildcard letters: ALL of them (match_all=True) or at
    least ONE of them (match_all=False); an empty wildcard set always passes
  - each known pattern letter is at its position, and no open position holds
    a letter excluded for that position

match_all is always chosen by the caller. Narrowing the answer set uses
match_all=True; the broad elimination search uses match_all=False.

Malformed input never raises; the word just doesn't match.
"""

from typing import Iterable, List

from .constraints import WILDCARD_CHAR, Constraints


def word_matches(word: str, constraints: Constraints, match_all: bool = True) -> bool:
    pattern = constraints.pattern
    if not pattern or len(word) != len(pattern):
        return False

    excluded = constraints.excluded_letters
    if excluded and any(ch in excluded for ch in word):
        return False

    wildcards = constraints.wildcard_letters
    if wildcards:
        check = all if match_all else any
        if not check(letter in word for letter in wildcards):
            return False

    by_pos = constraints.excluded_by_position
    for i, (ch, want) in enumerate(zip(word, pattern)):
        if want == WILDCARD_CHAR:
            if ch in by_pos.get(i, ()):
                return False
        elif ch != want:
            return False

    return True


def get_matching_words(words: Iterable[str], constraints: Constraints,
                       match_all: bool = True) -> List[str]:
    """Matching words in input order (sorting is left to the presenter)."""
    return [w for w in words if word_matches(w, constraints, match_all)]
