"""
Input validation for the CLI boundary.

The core never raises on bad data (it just returns nothing useful), so the
checks that produce user-facing errors live here:
  - validate_guess       : a-z only, exact length, optionally a known word
  - validate_result      : exact length, only '=', '-', 'x' (or 'X')
  - validate_word_length : at least MIN_WORD_LENGTH letters
"""

from typing import Iterable, Optional, Set

from .constraints import MIN_WORD_LENGTH, RESULT_CODES


def validate_guess(word: str, N: int, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is an N-letter alphabetic guess.

    If `allowed` is given the word must also be in it. The list is turned
    into a set on every call; callers in a loop should pass a set.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) else {
        a.strip().lower() for a in allowed}
    return w in allowed_set


def validate_result(result: str, N: int) -> bool:
    if not isinstance(result, str):
        return False
    r = result.strip().lower()
    return len(r) == N and set(r) <= RESULT_CODES


def validate_word_length(N: int) -> None:
    if N < MIN_WORD_LENGTH:
        raise ValueError(f"word length must be at least {MIN_WORD_LENGTH}; got {N}")
