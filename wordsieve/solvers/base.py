from __future__ import annotations
import random
from typing import Dict, List, Type

from wordsieve.engine import WORDLE_LENGTH

# ---- Solver registry (id -> class) ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register adds a solver class to REGISTRY under its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    """
    A solver proposes one guess per turn.

    The game loop calls reset() once per game and then next_guess(state)
    each turn, where `state` carries:
      - "turn"        : 1-based turn number
      - "constraints" : current wordsieve.engine.Constraints
      - "candidates"  : solution words still matching the constraints
      - "solutions"   : the full solution pool
      - "words"       : the full guess dictionary
      - "history"     : list of (guess, result) so far
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = WORDLE_LENGTH
        self.solutions: List[str] = []
        self.words: List[str] = []
        self.rng = random.Random()

    def reset(self, *, solutions: List[str], words: List[str], N: int,
              seed: int | None = None) -> None:
        self.solutions = list(solutions)
        self.words = list(words)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
