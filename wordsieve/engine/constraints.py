"""
Constraint model: everything we know about the hidden word so far.

Fields:
  - pattern              : one char per position; a known letter or '-'
  - wildcard_letters     : letters known to be in the word, position unknown
  - excluded_letters     : letters known to be absent from the word
  - excluded_by_position : 0-based position -> letters forbidden at that spot

The model is a frozen dataclass. Turns never mutate it in place; the
translator returns a fresh instance and the caller keeps the latest one.

External form (CLI flags) uses 1-based positions, e.g. '{"1":"ab","4":"cd"}'.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Union

log = logging.getLogger(__name__)

# Result-code alphabet (one char per guessed letter)
MATCHED = "="
WILDCARD = "-"
MISSED = "x"
RESULT_CODES = frozenset({MATCHED, WILDCARD, MISSED})

# Pattern placeholder for an unknown position
WILDCARD_CHAR = "-"

WORDLE_LENGTH = 5
MIN_WORD_LENGTH = 3

PositionMap = Dict[int, FrozenSet[str]]


@dataclass(frozen=True)
class Constraints:
    pattern: str
    wildcard_letters: FrozenSet[str] = frozenset()
    excluded_letters: FrozenSet[str] = frozenset()
    excluded_by_position: PositionMap = field(default_factory=dict)

    @classmethod
    def blank(cls, word_length: int = WORDLE_LENGTH) -> "Constraints":
        """Start-of-game model: all wildcards, nothing known."""
        return cls(pattern=WILDCARD_CHAR * word_length)

    @property
    def word_length(self) -> int:
        return len(self.pattern)

    @property
    def known_letters(self) -> FrozenSet[str]:
        return frozenset(ch for ch in self.pattern if ch != WILDCARD_CHAR)

    def excluded_at(self, position: int) -> FrozenSet[str]:
        return self.excluded_by_position.get(position, frozenset())

    @classmethod
    def from_options(
            cls,
            word_length: int,
            *,
            pattern: str = "",
            wildcards: str = "",
            excluded: str = "",
            excluded_by_position: Union[str, Mapping, None] = None,
    ) -> "Constraints":
        """
        Build a model from the CLI form of the constraints.

        Raises ValueError on a pattern of the wrong length, malformed JSON,
        or a position key that is not an integer >= 1. Positions past the
        word length can never apply, so they are dropped with a warning.
        """
        pattern = (pattern or "").strip().lower() or WILDCARD_CHAR * word_length
        if len(pattern) != word_length:
            raise ValueError(
                f"pattern must be {word_length} letters long; '{pattern}' is {len(pattern)}")

        raw = excluded_by_position or {}
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ValueError(f"invalid JSON for excluded-by-position: {raw!r}") from e
            if not isinstance(raw, dict):
                raise ValueError("excluded-by-position must be a JSON object")

        by_pos: PositionMap = {}
        for key, letters in raw.items():
            try:
                pos = int(key)
            except (TypeError, ValueError) as e:
                raise ValueError(f"position {key!r} is not an integer") from e
            if pos < 1:
                raise ValueError(f"position {pos} out of range (positions start at 1)")
            if pos > word_length:
                log.warning("ignoring position %d: word length is %d", pos, word_length)
                continue
            letters = frozenset(str(letters).lower())
            if letters:
                by_pos[pos - 1] = by_pos.get(pos - 1, frozenset()) | letters

        return cls(
            pattern=pattern,
            wildcard_letters=frozenset((wildcards or "").lower()),
            excluded_letters=frozenset((excluded or "").lower()),
            excluded_by_position=by_pos,
        )

    def to_options(self) -> Dict[str, str]:
        """Inverse of from_options; letters sorted, positions 1-based."""
        by_pos = {
            str(pos + 1): "".join(sorted(letters))
            for pos, letters in sorted(self.excluded_by_position.items())
            if letters
        }
        return {
            "pattern": self.pattern,
            "wildcards": "".join(sorted(self.wildcard_letters)),
            "excluded": "".join(sorted(self.excluded_letters)),
            "excluded_by_position": json.dumps(by_pos, separators=(",", ":")) if by_pos else "",
        }
