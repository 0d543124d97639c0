"""
Word-list validator.

Checks a pair of lists before a run:
  - solutions: the words that can be the hidden answer
  - words:     the full guess dictionary (elimination probes come from here)

Each file must hold one lowercase a-z word of length N per line. The report
counts valid, unique and invalid lines, hashes the raw bytes (SHA-256) and
checks solutions ⊆ words. It is a plain dict so it can go straight into a
run manifest.

    rep = validate_wordlists(5, "data/solutions_5.txt", "data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ListReport:
    path: str
    exists: bool
    count: int           # valid lines
    unique_count: int
    invalid_lines: int
    sha256: str          # "" when the file is missing


@dataclass
class ValidationReport:
    N: int
    solutions: ListReport
    words: ListReport
    solutions_subset_words: bool
    passed: bool
    issues: List[str]


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path, N: int) -> Tuple[List[str], int]:
    """(valid_words, invalid_count); blank lines are invalid too."""
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isalpha() and w.isascii() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def _report(path: Path, N: int, label: str, issues: List[str]) -> Tuple[ListReport, set]:
    if not path.exists():
        issues.append(f"{label} file not found: {path}")
        return ListReport(str(path), False, 0, 0, 0, ""), set()

    valid, invalid = _scan(path, N)
    unique = set(valid)
    rep = ListReport(
        path=str(path),
        exists=True,
        count=len(valid),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256(path),
    )
    if rep.count == 0:
        issues.append(f"{label} file contains 0 valid words")
    if invalid:
        issues.append(f"{label} has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        issues.append(f"{label} contains duplicate lines")
    return rep, unique


def validate_wordlists(N: int, solutions_path: str, words_path: str) -> Dict:
    """
    Validate the solution list and the guess dictionary for word length N.

    `passed` is strict: both files exist and are non-empty, no invalid
    lines, and every solution is in the dictionary. Duplicates are reported
    in `issues` but do not fail the check.
    """
    issues: List[str] = []
    sol_rep, sol_set = _report(Path(solutions_path), N, "solutions", issues)
    word_rep, word_set = _report(Path(words_path), N, "words", issues)

    both_exist = sol_rep.exists and word_rep.exists
    subset_ok = both_exist and sol_set.issubset(word_set)
    if both_exist and not subset_ok:
        missing = sorted(sol_set - word_set)[:5]
        issues.append(f"solutions not subset of words (e.g., {missing})")

    passed = (
            subset_ok
            and sol_rep.count > 0
            and word_rep.count > 0
            and sol_rep.invalid_lines == 0
            and word_rep.invalid_lines == 0
    )
    return asdict(ValidationReport(
        N=N,
        solutions=sol_rep,
        words=word_rep,
        solutions_subset_words=subset_ok,
        passed=passed,
        issues=issues,
    ))


def pretty_summary(report: Dict) -> str:
    """
    One line for the console, e.g.
      N=5 | solutions=2315 (uniq=2315, sha=abc123...) | words=12972 (...) | solutions⊆words=True | OK
    """
    s, w = report["solutions"], report["words"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | solutions={s['count']} (uniq={s['unique_count']}, sha={s['sha256'][:12]}) "
        f"| words={w['count']} (uniq={w['unique_count']}, sha={w['sha256'][:12]}) "
        f"| solutions⊆words={report['solutions_subset_words']} | {status}"
    )
