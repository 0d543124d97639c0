"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random among the words that still match the
    constraint model (the harness passes them in as "candidates").
  - If the candidate set is empty, fall back to the full dictionary.

A seeded baseline to compare the elimination heuristic against; it never
plays a probe word.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool: List[str] = candidates if candidates else state["words"]

        if not pool:
            return "a" * self.N

        return pool[self.rng.randrange(len(pool))]
