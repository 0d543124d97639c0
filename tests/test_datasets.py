from pathlib import Path

import pytest
from wordsieve.datasets import (
    load_words, merge_words, pretty_summary, read_lines, validate_wordlists,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    sol = tmp_path / "solutions_5.txt"
    words = tmp_path / "words_5.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(words, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is True
    assert rep["solutions_subset_words"] is True
    assert rep["solutions"]["count"] == 3 and rep["words"]["unique_count"] == 5
    s = pretty_summary(rep)
    assert "N=5" in s and "solutions⊆words=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    sol = tmp_path / "solutions_6.txt"
    words = tmp_path / "words_6.txt"
    # 'crane' is the wrong length for N=6 and '???' is not a word
    sol.write_text("raiser\ncrane\n???\n", encoding="utf-8")
    words.write_text("raiser\nplanet\npalate\n", encoding="utf-8")

    rep = validate_wordlists(6, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["solutions"]["invalid_lines"] == 2
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    sol = tmp_path / "solutions_5.txt"
    words = tmp_path / "words_5.txt"
    _write(sol, ["crane", "raise", "stare"])
    _write(words, ["crane", "stare"])

    rep = validate_wordlists(5, str(sol), str(words))
    assert rep["passed"] is False
    assert rep["solutions_subset_words"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane"])

    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(words))
    assert rep["passed"] is False
    assert rep["solutions"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_load_words_normalizes_and_filters(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\r\n  slate \n\ncranes\nab-cd\nCRANE\n", encoding="utf-8")
    assert load_words(p, 5) == ["crane", "slate", "crane"]


def test_read_lines_strips_line_endings(tmp_path: Path):
    p = tmp_path / "out.txt"
    p.write_bytes(b"a\r\nb\n")
    assert read_lines(p) == ["a", "b"]
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_merge_words_keeps_first_occurrence_order():
    assert merge_words(["crane", "slate"], ["Trace", "crane", " slate", ""]) == [
        "crane", "slate", "trace"]
