from collections import Counter

from wordsieve.engine import Constraints
from wordsieve.ranking import (
    AdviceConfig, advise, get_best_elimination_words, get_best_guess, get_elimination_words,
    get_letter_count, get_letter_distribution, search_words,
)
from wordsieve.ranking.elimination import _positional_sweep

MATCHING = ["crane", "crate", "crave"]
WORDS = MATCHING + ["nerve", "event", "vents", "tenet"]


# --- letter statistics ---
def test_letter_count_skips_known_letters():
    counts, order = get_letter_count(["abc", "abd"], "a--", "b")
    assert counts == Counter({"c": 1, "d": 1})
    assert order == "cd"


def test_letter_count_order_ties_break_by_letter():
    counts, order = get_letter_count(["ba", "ca"], "--", "")
    assert counts["a"] == 2
    assert order == "abc"


def test_letter_count_empty():
    counts, order = get_letter_count([], "-----", "")
    assert not counts and order == ""


def test_letter_distribution():
    assert get_letter_distribution([], 5) == []
    dist = get_letter_distribution(["ab", "ac", "abc"], 2)
    assert dist == [Counter({"a": 2}), Counter({"b": 1, "c": 1})]


# --- elimination search ---
def test_elimination_words_any_letter():
    words = ["abc", "xbc", "ayz", "aaa"]
    assert get_elimination_words("xyz", words, 3) == ["xbc", "ayz"]


def test_elimination_words_all_letters_shrinks_until_found():
    words = ["abc", "xbc", "ayz", "aaa"]
    assert get_elimination_words("xyz", words, 3, match_all=True) == ["xbc"]


def test_elimination_words_truncates_to_word_length():
    # only the top 2 letters ("qr") are tried for 2-letter words
    assert get_elimination_words("qrs", ["ss", "qa"], 2) == ["qa"]


def test_elimination_words_empty_inputs():
    assert get_elimination_words("", WORDS, 5) == []
    assert get_elimination_words("ent", [], 5) == []


# --- best elimination ranking ---
def _stats(matching, pattern):
    counts, order = get_letter_count(matching, pattern, "")
    return order, counts, get_letter_distribution(matching, len(pattern))


def test_best_elimination_empty_matching():
    order, counts, dist = _stats(MATCHING, "cra--")
    assert get_best_elimination_words([], WORDS, 5, order, counts, dist) == []
    assert get_best_elimination_words(MATCHING, [], 5, order, counts, dist) == []


def test_best_elimination_positional_sweep_then_coverage():
    order, counts, dist = _stats(MATCHING, "cra--")
    assert order == "entv"
    elimination = ["event", "vents", "tenet", "crane", "nerve"]
    assert get_best_elimination_words(MATCHING, elimination, 5, order, counts, dist) == ["nerve"]


def test_best_elimination_prefers_possible_answers():
    order, counts = "cd", {"c": 1, "d": 1}
    dist = [{"a": 2}, {"b": 2}, {"c": 1, "d": 1}]
    out = get_best_elimination_words(["abc", "abd"], ["xyc", "abd", "xyd", "abc"], 3,
                                     order, counts, dist)
    assert out == ["abc", "abd"]


def test_best_elimination_final_order_by_positional_score():
    order, counts = "cd", {"c": 1, "d": 1}
    dist = [{"a": 2}, {"b": 2}, {"c": 1, "d": 1}]
    out = get_best_elimination_words(["abc", "abd"], ["xyc", "xbd", "ayd"], 3,
                                     order, counts, dist)
    assert out == ["ayd", "xbd", "xyc"]


def test_best_elimination_skips_stage_that_would_empty():
    order, counts = "cd", {"c": 1, "d": 1}
    dist = [{"a": 2}, {"b": 2}, {"c": 1, "d": 1}]
    out = get_best_elimination_words(["abc", "abd"], ["zzz", "yyy"], 3, order, counts, dist)
    assert out == ["yyy", "zzz"]


def test_positional_sweep_tied_positions_first_wins():
    # 'a' is equally common at positions 1 and 2; position 1 is used
    dist = [{"a": 1}, {"a": 1}, {}]
    out = _positional_sweep(["axx", "xax", "ayy"], 3, "a", {"a": 5}, dist)
    assert out == ["axx", "ayy"]


def test_positional_sweep_stops_at_single_survivor():
    looked_up = []

    class Column(dict):
        def get(self, key, default=None):
            looked_up.append(key)
            return super().get(key, default)

    dist = [Column(a=2), Column(b=1)]
    out = _positional_sweep(["ac", "bc"], 2, "ab", {"a": 2, "b": 1}, dist)
    assert out == ["ac"]
    assert set(looked_up) == {"a"}


def test_positional_sweep_limited_to_word_length_groups():
    # 'b' has no best position but still uses up a turn of the sweep
    counts = {"a": 3, "b": 2, "c": 1}
    dist = [{"a": 2}, {"c": 1}]
    assert _positional_sweep(["ab", "ac"], 2, "abc", counts, dist) == ["ab", "ac"]
    assert _positional_sweep(["ab", "ac"], 3, "abc", counts, dist) == ["ac"]


def test_positional_sweep_tied_counts_form_one_group():
    # 'a' and 'b' share a count, so either one at position 1 survives
    counts = {"a": 2, "b": 2, "c": 1}
    dist = [{"a": 2, "b": 2}, {"c": 1}]
    assert _positional_sweep(["ax", "bc", "xc"], 2, "ab", counts, dist) == ["ax", "bc"]
    # the tied pair takes one turn, leaving the second for 'c'
    assert _positional_sweep(["ax", "bc", "xc"], 2, "abc", counts, dist) == ["bc"]


# --- advice ---
def test_get_best_guess_priority():
    assert get_best_guess(["a", "b"], ["x"], ["y"]) == "a"
    assert get_best_guess(["a", "b", "c"], ["x"], ["y"]) == "y"
    assert get_best_guess(["a", "b", "c"], ["x"], []) == "x"
    assert get_best_guess(["a", "b", "c"], [], []) == "a"
    assert get_best_guess([], [], []) == ""


def test_advise_recommends_elimination_word():
    advice = advise(MATCHING, WORDS, Constraints(pattern="cra--"))
    assert advice.matching_words == MATCHING
    assert advice.letter_order == "entv"
    assert advice.elimination_words == WORDS
    assert advice.best_elimination_words == ["nerve"]
    assert advice.guess == "nerve"
    assert advice.broadened is False


def test_advise_guesses_directly_when_two_left():
    advice = advise(MATCHING, WORDS, Constraints(pattern="cra-e", excluded_letters=frozenset("t")))
    assert advice.matching_words == ["crane", "crave"]
    assert advice.guess == "crane"


def test_advise_broadens_to_all_words():
    advice = advise(MATCHING, WORDS, Constraints(pattern="n----"))
    assert advice.broadened is True
    assert advice.matching_words == ["nerve"]
    assert advice.guess == "nerve"

    strict = advise(MATCHING, WORDS, Constraints(pattern="n----"),
                    AdviceConfig(broaden_when_empty=False))
    assert strict.matching_words == [] and strict.guess == ""


def test_advise_empty_inputs():
    advice = advise([], [], Constraints.blank(5))
    assert advice.matching_words == []
    assert advice.best_elimination_words == []
    assert advice.guess == ""


# --- word search ---
def test_search_words_ranks_by_search_letters():
    c = Constraints(pattern="-----", wildcard_letters=frozenset("v"))
    assert search_words(WORDS, c) == ["vents"]


def test_search_words_needs_letters():
    assert search_words(WORDS, Constraints.blank(5)) == []


def test_search_words_lists_pattern_matches_without_search_letters():
    c = Constraints(pattern="cra--", wildcard_letters=frozenset("z"))
    assert search_words(WORDS, c) == ["crane", "crate", "crave"]


def test_search_words_respects_exclusions():
    c = Constraints(pattern="-----", wildcard_letters=frozenset("v"),
                    excluded_letters=frozenset("s"))
    assert search_words(WORDS, c) == ["crave", "event", "nerve"]
