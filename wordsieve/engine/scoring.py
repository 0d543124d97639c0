"""
Feedback simulation for a single (guess, answer) pair.

Conventions (same alphabet the translator reads):
  - '=' : MATCHED  = correct letter in the correct position
  - '-' : WILDCARD = letter in the word, wrong position
  - 'x' : MISSED   = letter not present (or present fewer times than guessed)

Two passes, so repeated letters respect the answer's true multiplicity:
  1) mark all MATCHED positions and count the answer's unmatched letters
  2) mark WILDCARD only while that letter still has an unmatched copy

The harness uses this to play games against a known answer; the live game
supplies its own result string instead.
"""

from collections import Counter

from .constraints import MATCHED, MISSED, WILDCARD


def score(guess: str, answer: str) -> str:
    """
    Compute the result string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "x=---"
      score("chick", "chirp") -> "===xx"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess {guess!r} and answer {answer!r} must be the same length")

    result = [MISSED] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            result[i] = MATCHED
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if result[i] == MATCHED:
            continue
        if remaining[g] > 0:
            result[i] = WILDCARD
            remaining[g] -= 1

    return "".join(result)


def is_solved(result: str) -> bool:
    return bool(result) and all(ch == MATCHED for ch in result)
