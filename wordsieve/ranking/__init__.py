from .letters import get_letter_count, get_letter_distribution
from .elimination import get_elimination_words, get_best_elimination_words
from .advice import Advice, AdviceConfig, advise, get_best_guess, search_words

__all__ = [
    "get_letter_count", "get_letter_distribution", "get_elimination_words",
    "get_best_elimination_words", "Advice", "AdviceConfig", "advise", "get_best_guess",
    "search_words",
]
