from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str, N: int) -> List[str]:
    """
    Word list for the engine: one word per line, lower-cased, stripped, and
    only alphabetic words of length N. Order and duplicates are kept as read.
    """
    words = (ln.strip().lower() for ln in read_lines(p))
    return [w for w in words if len(w) == N and w.isalpha()]


def merge_words(*lists: Iterable[str]) -> List[str]:
    """
    Order-preserving union without duplicates, e.g. solution words followed
    by the extra guess-only words to build the full dictionary.
    """
    seen, out = set(), []
    for words in lists:
        for w in words:
            w = w.strip().lower()
            if w and w not in seen:
                seen.add(w)
                out.append(w)
    return out
