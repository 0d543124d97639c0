# apps/cli/solve.py
"""
Turn-by-turn helper for a live game.

Subcommands:
  guess   apply one guess + result to the constraints you already have, then
          print the matching words, elimination words and the next guess,
          plus the command line to run after your next guess
  search  dictionary lookup over all words (--use-solutions: only the
          solutions list): words that fit the pattern/exclusions, ranked by
          the --wildcards letters

Constraint flags mirror the printed "next command", e.g.

    python -m apps.cli.solve guess --words data/words_5.txt \
        --pattern=-h--- --wildcards=e --exclude-all=st \
        --exclude-pos='{"5":"e"}' --guess=crane --guess-result=xx-x-

Pass values with "=" (--pattern=-h---) when they start with "-".

Result symbols: '=' right letter/right spot, '-' in the word/wrong spot,
'x' not in the word.
"""

from __future__ import annotations

import argparse
import logging
import shlex
from typing import List, Sequence

from wordsieve.datasets import load_words, merge_words
from wordsieve.engine import (
    WORDLE_LENGTH, Constraints, is_solved, translate_guess_results, validate_guess,
    validate_result, validate_word_length,
)
from wordsieve.ranking import Advice, AdviceConfig, advise, search_words

MAX_WORDS_TO_PRINT = 100
LINE_WIDTH = 80


def print_words(words: Sequence[str], description: str, exclamation: str, max_print: int) -> None:
    """Sorted copy of `words`, wrapped to LINE_WIDTH, at most `max_print` shown."""
    if not words:
        print(f"\nNo {description}!")
        return
    if len(words) == 1 and exclamation:
        print(f"\n{description} - {exclamation}! - '{words[0]}'")
        return

    print(f"\n{description} ({len(words)}):")
    if len(words) > max_print:
        print(f"Only printing first {max_print}")
    line: List[str] = []
    for w in sorted(words)[:max_print]:
        if line and len(" ".join(line + [w])) > LINE_WIDTH:
            print(" ".join(line))
            line = []
        line.append(w)
    print(" ".join(line))


def print_letters_to_try(advice: Advice) -> None:
    if not advice.letter_order:
        print("\nNo additional letters to try!")
        return
    print(f"\nTry these letters ({len(advice.letter_order)}):")
    print(" ".join(f"{ch}={advice.letter_counts[ch]}" for ch in advice.letter_order))


def print_distribution(advice: Advice) -> None:
    if not advice.letter_distribution:
        print("\nNo statistics to print!")
        return
    print()
    for pos, counts in enumerate(advice.letter_distribution, start=1):
        print(f"Letter distribution for position #{pos}:")
        print(" ".join(f"{ch}={n}" for ch, n in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))))


def next_command(args: argparse.Namespace, constraints: Constraints, guess: str) -> str:
    opts = constraints.to_options()
    parts = ["python", "-m", "apps.cli.solve", args.command, "--words", args.words]
    if args.solutions:
        parts += ["--solutions", args.solutions]
    if args.N != WORDLE_LENGTH:
        parts += ["--N", str(args.N)]
    # "--flag=value" so values starting with "-" are not read as options
    parts.append(f"--pattern={opts['pattern']}")
    for flag, key in (("--wildcards", "wildcards"), ("--exclude-all", "excluded"),
                      ("--exclude-pos", "excluded_by_position")):
        if opts[key]:
            parts.append(f"{flag}={opts[key]}")
    line = " ".join(shlex.quote(p) for p in parts)
    if guess:
        line += f" --guess={guess} --guess-result="
    return line


def _constraints_from_args(args: argparse.Namespace) -> Constraints:
    return Constraints.from_options(
        args.N,
        pattern=args.pattern,
        wildcards=args.wildcards,
        excluded=args.exclude_all,
        excluded_by_position=args.exclude_pos,
    )


def cmd_guess(args: argparse.Namespace, solutions: List[str], words: List[str]) -> None:
    constraints = _constraints_from_args(args)

    if args.guess or args.guess_result:
        if not validate_guess(args.guess, args.N):
            raise ValueError(f"guess must be {args.N} letters a-z; got {args.guess!r}")
        if not validate_result(args.guess_result, args.N):
            raise ValueError(
                f"result must be {args.N} of '=', '-', 'x'; got {args.guess_result!r}")
        if is_solved(args.guess_result.strip()):
            print(f"\nCongratulations, '{args.guess.lower()}' is the solution word!\n")
            return
        constraints = translate_guess_results(args.guess, args.guess_result, constraints)

    advice = advise(solutions, words, constraints, AdviceConfig(word_length=args.N))
    if advice.broadened:
        print("\nNo matching solution words; searched all words instead.")

    print_words(advice.matching_words, "MATCHING WORDS", "EXACT MATCH", args.max_print)
    if len(advice.matching_words) > 1:
        print_letters_to_try(advice)
        if args.stats:
            print_distribution(advice)
        if len(advice.elimination_words) < 2 * args.max_print:
            print_words(advice.elimination_words, "ELIMINATION WORDS", "BEST CHOICE", args.max_print)
        if len(advice.elimination_words) > 1:
            print_words(advice.best_elimination_words, "BEST ELIMINATION WORDS", "BEST CHOICE",
                        args.max_print)

    if advice.guess:
        print(f"\nNext guess: '{advice.guess}'")
    print(f"\nTry:\n{next_command(args, constraints, advice.guess)}\n")


def cmd_search(args: argparse.Namespace, solutions: List[str], words: List[str]) -> None:
    constraints = _constraints_from_args(args)
    if not constraints.wildcard_letters:
        print("\nNothing to SEARCH! Use --wildcards to give letters to search for.\n")
        return

    if args.use_solutions:
        pool, title = solutions, "SEARCH SOLUTION WORDS"
    else:
        pool, title = words, "SEARCH ALL WORDS"
    found = search_words(pool, constraints)
    if found:
        print_words(found, title, "EXACT MATCH", args.max_print)
        print(f"\nBest match: '{found[0]}'\n")
    else:
        print("\nNO MATCHING WORDS. Please change args to get matching results.\n")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordsieve: guess helper for Wordle-style games")
    sub = ap.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--words", required=True,
                        help="word dictionary file (one word per line); elimination probes come from here")
    common.add_argument("--solutions",
                        help="possible answers file (default: same as --words); merged into --words")
    common.add_argument("--N", type=int, default=WORDLE_LENGTH, help="word length (>= 3)")
    common.add_argument("--pattern", default="",
                        help="known letters in place, '-' for unknown, e.g. 't----'")
    common.add_argument("--wildcards", default="",
                        help="letters in the word whose position is unknown, e.g. 'ae'")
    common.add_argument("--exclude-all", default="",
                        help="letters not in the word anywhere, e.g. 'ies'")
    common.add_argument("--exclude-pos", default="",
                        help="JSON of 1-based position -> letters not allowed there, e.g. '{\"1\":\"ab\"}'")
    common.add_argument("--stats", action="store_true",
                        help="print per-position letter distribution of the matching words")
    common.add_argument("--max-print", type=int, default=MAX_WORDS_TO_PRINT,
                        help="max words to print per list")
    common.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    g = sub.add_parser("guess", parents=[common], help="get help with a single guess")
    g.add_argument("--guess", default="", help="the word you played")
    g.add_argument("--guess-result", default="",
                   help="one symbol per letter: '=' match, '-' wrong spot, 'x' miss")

    s = sub.add_parser("search", parents=[common], help="dictionary lookup by letters")
    s.add_argument("--use-solutions", action="store_true",
                   help="search only the --solutions list instead of all words")
    return ap


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        validate_word_length(args.N)
        words = load_words(args.words, args.N)
        solutions = load_words(args.solutions, args.N) if args.solutions else list(words)
        words = merge_words(solutions, words)
        if not words:
            raise ValueError(f"'{args.words}' does not include any {args.N} letter words")

        print(f"Word length: {args.N} | solutions: {len(solutions)} | words: {len(words)}")
        if args.command == "guess":
            cmd_guess(args, solutions, words)
        else:
            cmd_search(args, solutions, words)
    except (ValueError, FileNotFoundError) as e:
        raise SystemExit(f"ERROR: {e}") from e


if __name__ == "__main__":
    main()
