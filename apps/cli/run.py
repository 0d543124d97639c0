# apps/cli/run.py
"""
Batch simulation: play a solver against many known answers.

This script:
  1) Validates the word lists (counts + SHA, solutions ⊆ words).
  2) Loads the lists and instantiates the requested solver.
  3) Plays every (or a seeded sample of) solution word with a progress bar
     and writes:
       - CSV:  one row per game with guess/result columns
       - JSON: manifest with config, word-list report, git commit and summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

from wordsieve.datasets import load_words, merge_words, pretty_summary, validate_wordlists
from wordsieve.engine import WORDLE_LENGTH, validate_word_length
from wordsieve.harness import MAX_TURNS, run_batch, summarize
from wordsieve.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordsieve.solvers import create_solver, get_solver_ids


def main():
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordsieve: simulate games with a solver")
    ap.add_argument("--solver", default="elimination", help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--N", type=int, default=WORDLE_LENGTH, help="word length (>= 3)")
    ap.add_argument("--solutions", required=True, help="possible answers (one word per line)")
    ap.add_argument("--words", required=True,
                    help="guess dictionary; solutions are merged in if missing")
    ap.add_argument("--sample", type=int, help="play only this many answers (seeded sample)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        validate_word_length(args.N)
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(f"ERROR: {e}") from e

    # 1) Validate lists; problems are reported but do not stop the run
    rep = validate_wordlists(args.N, args.solutions, args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load
    solutions = load_words(args.solutions, args.N)
    words = merge_words(solutions, load_words(args.words, args.N))
    if not solutions:
        raise SystemExit(f"ERROR: '{args.solutions}' has no {args.N} letter words")

    # 3) Cases (deterministic sample by seed)
    rng = np.random.default_rng(args.seed)
    if args.sample and args.sample < len(solutions):
        cases = [str(w) for w in rng.choice(solutions, size=args.sample, replace=False)]
    else:
        cases = list(solutions)

    progress = tqdm(cases, ncols=80, desc=solver.id, unit="game",
                    disable=args.no_progress, file=sys.stderr)
    results = run_batch(solver, progress, solutions=solutions, words=words, N=args.N,
                        max_turns=MAX_TURNS, seed=args.seed)

    summary = summarize(results)
    print(
        f"{solver.id}: solved {summary['solved']}/{summary['games']} "
        f"({100.0 * summary['solve_rate']:.1f}%) | mean {summary['mean_guesses']:.3f} "
        f"| median {summary['median_guesses']:.1f} | max {summary['max_guesses']} "
        f"| histogram {summary['histogram']}"
    )

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), max_turns=MAX_TURNS, N=args.N)
    manifest_path = write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(outdir / f"run_{run_id}_manifest.json"))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
