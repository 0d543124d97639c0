"""
One turn of advice: from the current constraints to a recommended guess.

Pipeline (per turn):
  1) matching words over the solution pool (all wildcard letters required)
  2) if still ambiguous: letter count/order + distribution over the matches
  3) elimination words from the full dictionary
  4) best elimination words (ranked)
  5) pick the guess: a direct answer when only a couple remain, else the
     best probe

`advise` is a pure function of its inputs; the game loop owns the
constraints and feeds the next result back through the translator.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import List, Sequence

from wordsieve.engine import WORDLE_LENGTH, Constraints, get_matching_words
from .elimination import get_best_elimination_words, get_elimination_words
from .letters import get_letter_count, get_letter_distribution

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdviceConfig:
    word_length: int = WORDLE_LENGTH
    # With this many matches or fewer, just guess the first match
    direct_guess_limit: int = 2
    # Retry against the full dictionary when no solution word matches
    broaden_when_empty: bool = True


@dataclass
class Advice:
    matching_words: List[str] = field(default_factory=list)
    elimination_words: List[str] = field(default_factory=list)
    best_elimination_words: List[str] = field(default_factory=list)
    letter_counts: Counter = field(default_factory=Counter)
    letter_order: str = ""
    letter_distribution: List[Counter] = field(default_factory=list)
    guess: str = ""
    broadened: bool = False


def get_best_guess(matching_words: Sequence[str], elimination_words: Sequence[str],
                   best_elimination_words: Sequence[str], direct_guess_limit: int = 2) -> str:
    if 0 < len(matching_words) <= direct_guess_limit:
        return matching_words[0]
    if best_elimination_words:
        return best_elimination_words[0]
    if elimination_words:
        return elimination_words[0]
    if matching_words:
        return matching_words[0]
    return ""


def advise(solution_words: Sequence[str], all_words: Sequence[str], constraints: Constraints,
           config: AdviceConfig = AdviceConfig()) -> Advice:
    N = config.word_length
    advice = Advice(matching_words=get_matching_words(solution_words, constraints, match_all=True))

    if not advice.matching_words and config.broaden_when_empty and len(all_words) != len(solution_words):
        log.debug("no solution word matches; searching all %d words", len(all_words))
        advice.matching_words = get_matching_words(all_words, constraints, match_all=True)
        advice.broadened = True

    matching = advice.matching_words
    if len(matching) > 1:
        advice.letter_counts, advice.letter_order = get_letter_count(
            matching, constraints.pattern, constraints.wildcard_letters)
        advice.letter_distribution = get_letter_distribution(matching, N)

        if advice.letter_order:
            advice.elimination_words = get_elimination_words(advice.letter_order, all_words, N)
            if len(advice.elimination_words) > 1:
                advice.best_elimination_words = get_best_elimination_words(
                    matching, advice.elimination_words, N, advice.letter_order,
                    advice.letter_counts, advice.letter_distribution,
                )

    advice.guess = get_best_guess(matching, advice.elimination_words,
                                  advice.best_elimination_words, config.direct_guess_limit)
    log.debug("%d matching, %d elimination, %d best; guess=%r", len(matching),
              len(advice.elimination_words), len(advice.best_elimination_words), advice.guess)
    return advice


def search_words(words: Sequence[str], constraints: Constraints) -> List[str]:
    """
    Dictionary lookup: words fitting the pattern and exclusions, narrowed to
    the ones that use the wildcard letters best. The wildcard letters only
    rank; when no match uses them, every match is returned.
    """
    letters = "".join(sorted(constraints.wildcard_letters))
    if not letters:
        return []

    N = constraints.word_length
    found = get_matching_words(words, replace(constraints, wildcard_letters=frozenset()))
    if len(found) > 1:
        counts = Counter(letters)
        distribution = [Counter(counts) for _ in range(N)]
        found = get_best_elimination_words(found, found, N, letters, counts, distribution)
    return found
