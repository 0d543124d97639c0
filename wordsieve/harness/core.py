"""
Game simulation harness.

- run_case : play one game against a known answer with a given solver
- run_batch: play many games back-to-back (optionally only the first K)
- summarize: solve rate and guess-count statistics for a batch

Each game owns its Constraints: after every guess the simulated result is
folded in with translate_guess_results and the candidate list is re-filtered
with get_matching_words, exactly as a live game loop would do it.
"""

from __future__ import annotations
import time
from itertools import islice
from typing import Dict, List, Iterable, Tuple

import numpy as np

from wordsieve.engine import (
    Constraints, get_matching_words, is_solved, score, translate_guess_results,
)

# Wordle's turn budget
MAX_TURNS = 6


def _assert_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        solutions: Iterable[str],
        words: Iterable[str],
        N: int,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver finds `answer` or runs out of turns.

    Args:
        solver:    a BaseSolver
        answer:    the hidden word for this case
        solutions: possible answers (candidate universe)
        words:     full guess dictionary (ideally a superset of solutions)
        N:         word length
        max_turns: must be MAX_TURNS (enforced)
        seed:      seed for the solver's RNG

    Returns:
        dict with success, guesses, time_ms, history [(guess, result)],
        answer, and candidates_left (matching words after the last turn)
    """
    _assert_turns(max_turns)

    solutions = [w for w in solutions if len(w) == N]
    words = [w for w in words if len(w) == N]
    solver.reset(solutions=solutions, words=words, N=N, seed=seed)

    constraints = Constraints.blank(N)
    candidates = list(solutions)
    history: List[Tuple[str, str]] = []
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "constraints": constraints,
            "candidates": candidates,
            "solutions": solutions,
            "words": words,
            "history": list(history),
        }
        guess = solver.next_guess(state).lower()
        result = score(guess, answer)
        history.append((guess, result))

        if is_solved(result):
            success = True
            break

        constraints = translate_guess_results(guess, result, constraints)
        candidates = get_matching_words(candidates, constraints)

    return {
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "answer": answer,
        "candidates_left": len(candidates),
    }


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        solutions: List[str],
        words: List[str],
        N: int,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run one case per answer. `sample` keeps only the first K answers (after
    filtering to length N). Per-case seeds are seed + index, so runs are
    reproducible without every game sharing one RNG stream.

    `answers` is consumed one game at a time, so it may be wrapped in a
    progress bar.
    """
    _assert_turns(max_turns)

    pool = (w for w in answers if len(w) == N)
    if sample is not None:
        pool = islice(pool, sample)

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, solutions=solutions, words=words, N=N,
                     max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out


def summarize(results: List[Dict], max_turns: int = MAX_TURNS) -> Dict:
    """
    Batch statistics. Guess stats cover solved games only; `histogram[k]`
    counts games solved in k+1 guesses.
    """
    n = len(results)
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    hist = np.bincount(solved - 1, minlength=max_turns) if solved.size else np.zeros(max_turns, dtype=int)
    return {
        "games": n,
        "solved": int(solved.size),
        "solve_rate": float(solved.size / n) if n else 0.0,
        "mean_guesses": float(solved.mean()) if solved.size else 0.0,
        "median_guesses": float(np.median(solved)) if solved.size else 0.0,
        "max_guesses": int(solved.max()) if solved.size else 0,
        "histogram": [int(c) for c in hist[:max_turns]],
    }
