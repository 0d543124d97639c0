"""
Guess translation: fold one (guess, result) pair into the constraint model.

Per position i:
  '=' MATCHED  -> pattern[i] = guess[i]
  '-' WILDCARD -> guess[i] joins wildcard_letters and is banned at i
  'x' MISSED   -> guess[i] is globally excluded ONLY if no other evidence says
                  the letter is in the word. Evidence is any other occurrence
                  in this guess marked '=' or '-' (before OR after i), or the
                  letter already being known from an earlier turn. With such
                  evidence the miss only bans the letter at i.

Repeated letters are where this matters: guessing "chick" with result "===xx"
pins the first 'c'; the second 'c' is missed, which tells us "no c at
position 3", not "no c at all".

Inconsistent input (length mismatch, unknown result symbol) returns the model
unchanged; nothing is half-applied.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Set

from .constraints import MATCHED, MISSED, RESULT_CODES, WILDCARD, WILDCARD_CHAR, Constraints

log = logging.getLogger(__name__)


def _normalize_result(result: str) -> str:
    # older clients send upper-case 'X' for a miss
    return result.strip().replace(MISSED.upper(), MISSED)


def translate_guess_results(guess: str, result: str, constraints: Constraints) -> Constraints:
    guess = guess.strip().lower()
    result = _normalize_result(result)

    if len(guess) != len(result) or len(guess) != constraints.word_length:
        log.debug("ignoring guess %r / result %r: length mismatch", guess, result)
        return constraints
    if not set(result) <= RESULT_CODES:
        log.debug("ignoring result %r: unknown symbols", result)
        return constraints

    pattern = list(constraints.pattern)
    wildcards: Set[str] = set(constraints.wildcard_letters)
    excluded: Set[str] = set(constraints.excluded_letters)
    by_pos: Dict[int, Set[str]] = {p: set(s) for p, s in constraints.excluded_by_position.items()}

    # Letters this guess proves present, plus what earlier turns proved
    present = {g for g, r in zip(guess, result) if r != MISSED}
    present |= constraints.known_letters | constraints.wildcard_letters

    for i, (letter, code) in enumerate(zip(guess, result)):
        if code == MATCHED:
            pattern[i] = letter
        elif code == WILDCARD:
            wildcards.add(letter)
            by_pos.setdefault(i, set()).add(letter)
        elif letter in present:
            by_pos.setdefault(i, set()).add(letter)
        else:
            excluded.add(letter)

    # A letter with positive evidence is never globally excluded, even if an
    # earlier (contradictory) turn excluded it.
    excluded -= {ch for ch in pattern if ch != WILDCARD_CHAR} | wildcards

    return replace(
        constraints,
        pattern="".join(pattern),
        wildcard_letters=frozenset(wildcards),
        excluded_letters=frozenset(excluded),
        excluded_by_position={p: frozenset(s) for p, s in by_pos.items() if s},
    )
