"""
Output files for simulation runs.

- write_csv:      one row per game, guesses and results in fixed columns
- write_manifest: JSON with run config, word-list report and summary
- timestamp_id:   compact UTC run id for filenames
- git_commit_or_unknown: short commit hash when run inside a git checkout

Result strings start with '=' or '-', which spreadsheet apps read as
formulas; they are written with a leading apostrophe to stay text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe(result: str) -> str:
    """Example: "=-x==" -> "'=-x==" """
    return "'" + result if result else result


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Columns: solver, N, answer, success, guesses, candidates_left, time_ms,
    then guess_1, result_1, ... guess_<max_turns>, result_<max_turns>.
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "N", "answer", "success", "guesses", "candidates_left", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"result_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "candidates_left": r.get("candidates_left", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                g, res = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = g
                row[f"result_{i}"] = _excel_safe(res)
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
