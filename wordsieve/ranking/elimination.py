"""
Elimination guesses: words picked to split the candidate set, even when they
cannot be the answer themselves.

get_elimination_words
  Search the full dictionary with an all-open pattern, using the top letters
  of `letter_order` (at most word_length of them) as the wildcard set. If
  nothing matches, retry with one letter fewer, down to a single letter, and
  stop at the first non-empty result. By default a word needs ANY of the
  letters (match_all=False); with match_all=True it needs ALL of them, and the
  shrinking retry is what finds the widest probe that exists.
  Excluded and position-banned letters are NOT applied here: a probe is
  allowed to reuse known-bad letters, it just wastes those slots.

get_best_elimination_words
  A progressive filter over the elimination words. A stage that would leave
  nothing is skipped and the previous survivors are kept.
    1. positional sweep over letter_order
    2. max distinct-letter coverage of letter_order
    3. max summed letter counts of the covered letters
    4. prefer words that are themselves still possible answers
    5. order by summed positional frequency (desc), then word (asc)
  The first element is the recommended probe.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, List, Mapping, Sequence

from wordsieve.engine import Constraints, get_matching_words

log = logging.getLogger(__name__)


def get_elimination_words(letter_order: str, words: Iterable[str], word_length: int,
                          *, match_all: bool = False) -> List[str]:
    words = list(words)
    num_letters = min(word_length, len(letter_order))
    log.debug("trying elimination letters %r", letter_order[:num_letters])

    open_pattern = Constraints.blank(word_length)
    for n in range(num_letters, 0, -1):
        probe = replace(open_pattern, wildcard_letters=frozenset(letter_order[:n]))
        found = get_matching_words(words, probe, match_all=match_all)
        if found:
            log.debug("%d elimination words using %d letter(s)", len(found), n)
            return found
    return []


def _keep_best(words: List[str], key: Callable[[str], int]) -> List[str]:
    """Words achieving the maximum of `key`, in input order."""
    if not words:
        return words
    scores = [key(w) for w in words]
    top = max(scores)
    return [w for w, s in zip(words, scores) if s == top]


def _positional_sweep(words: List[str], word_length: int, letter_order: str,
                      letter_counts: Mapping[str, int],
                      letter_distribution: Sequence[Mapping[str, int]]) -> List[str]:
    """
    Walk letters from most to least frequent. For each letter take the
    position where it is most common among the candidates (first position
    wins ties) and keep words having, at that position, any letter that
    shares its count. Stops at one survivor, or after word_length letters.
    """
    survivors = words
    processed = set()
    inspected = 0

    for letter in letter_order:
        if letter in processed:
            continue
        count = letter_counts.get(letter, 0)
        group = {ch for ch in letter_order if letter_counts.get(ch, 0) == count}
        processed |= group

        best_pos, best_count = -1, 0
        for pos in range(min(word_length, len(letter_distribution))):
            c = letter_distribution[pos].get(letter, 0)
            if c > best_count:
                best_pos, best_count = pos, c

        if best_pos >= 0:
            kept = [w for w in survivors if len(w) > best_pos and w[best_pos] in group]
            if kept:
                survivors = kept

        inspected += 1
        if len(survivors) == 1 or inspected >= word_length:
            break

    return survivors


def _positional_score(word: str, letter_distribution: Sequence[Mapping[str, int]]) -> int:
    return sum(letter_distribution[i].get(ch, 0)
               for i, ch in enumerate(word) if i < len(letter_distribution))


def get_best_elimination_words(
        matching_words: Sequence[str],
        elimination_words: Sequence[str],
        word_length: int,
        letter_order: str,
        letter_counts: Mapping[str, int],
        letter_distribution: Sequence[Mapping[str, int]],
) -> List[str]:
    if not matching_words or not elimination_words:
        return []

    order_letters = set(letter_order)

    best = _positional_sweep(list(elimination_words), word_length, letter_order,
                             letter_counts, letter_distribution)
    log.debug("positional sweep: %d survivor(s)", len(best))

    best = _keep_best(best, lambda w: len(order_letters & set(w)))
    best = _keep_best(best, lambda w: sum(letter_counts.get(ch, 0) for ch in order_letters & set(w)))
    log.debug("coverage + weighted score: %d survivor(s)", len(best))

    if len(best) > len(matching_words):
        answers = set(matching_words)
        possible = [w for w in best if w in answers]
        if possible:
            best = possible

    return sorted(best, key=lambda w: (-_positional_score(w, letter_distribution), w))
