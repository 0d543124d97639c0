"""
Elimination solver: the letter-elimination heuristic as a playable solver.

Each turn it asks wordsieve.ranking.advise for the current candidates and
plays the recommended guess: a candidate directly once only one or two are
left, otherwise the best elimination probe from the full dictionary.

The last Advice is kept on the instance so callers (the CLI, tests) can show
the matching / elimination lists that led to the guess.
"""

from __future__ import annotations

from typing import List, Optional

from wordsieve.ranking import Advice, AdviceConfig, advise
from .base import BaseSolver, register


@register
class EliminationSolver(BaseSolver):
    id = "elimination"
    name = "Letter Elimination"
    version = "1.0.0"

    DIRECT_GUESS_LIMIT = 2

    def __init__(self):
        super().__init__()
        self.last_advice: Optional[Advice] = None

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        words: List[str] = state["words"] or self.words

        config = AdviceConfig(word_length=self.N, direct_guess_limit=self.DIRECT_GUESS_LIMIT)
        # Candidates are already filtered; the advisor re-checks them against
        # the constraints, which is a no-op for an up-to-date list.
        advice = advise(candidates, words, state["constraints"], config)
        self.last_advice = advice

        if advice.guess:
            return advice.guess
        # Nothing matches at all (bad feedback upstream): any word keeps the game going
        pool = candidates or words
        return pool[0] if pool else "a" * self.N
