from .constraints import (
    MATCHED, MISSED, WILDCARD, WILDCARD_CHAR, WORDLE_LENGTH, MIN_WORD_LENGTH, Constraints,
)
from .matcher import word_matches, get_matching_words
from .translate import translate_guess_results
from .scoring import score, is_solved
from .validation import validate_guess, validate_result, validate_word_length

__all__ = [
    "MATCHED", "MISSED", "WILDCARD", "WILDCARD_CHAR", "WORDLE_LENGTH", "MIN_WORD_LENGTH",
    "Constraints", "word_matches", "get_matching_words", "translate_guess_results",
    "score", "is_solved", "validate_guess", "validate_result", "validate_word_length",
]
