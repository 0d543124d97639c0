import pytest
from wordsieve.solvers import create_solver
from wordsieve.harness import run_case, run_batch, summarize

SOLUTIONS = ["crane", "crate", "crave", "nerve", "event"]
WORDS = SOLUTIONS + ["vents", "tenet"]


def test_run_case_elimination_solves_with_elimination_word():
    solver = create_solver("elimination")
    r = run_case(solver, "crave", solutions=SOLUTIONS, words=WORDS, N=5, max_turns=6, seed=42)
    assert r["success"] is True
    assert r["history"][0] == ("crate", "===x=")
    assert r["history"][-1][0] == "crave"
    assert r["guesses"] <= 6


def test_run_batch_elimination_solves_everything():
    solver = create_solver("elimination")
    results = run_batch(solver, SOLUTIONS, solutions=SOLUTIONS, words=WORDS, N=5, seed=1)
    assert [r["answer"] for r in results] == SOLUTIONS
    assert all(r["solver_id"] == "elimination" for r in results)
    s = summarize(results)
    assert s["games"] == 5 and s["solve_rate"] == 1.0
    assert sum(s["histogram"]) == 5


def test_run_case_random_consistent_smoke():
    solver = create_solver("random_consistent")
    r = run_case(solver, "nerve", solutions=SOLUTIONS, words=WORDS, N=5, max_turns=6, seed=42)
    assert "success" in r and "history" in r
    assert r["success"] is True


def test_run_case_rejects_other_turn_budgets():
    with pytest.raises(ValueError):
        run_case(create_solver("elimination"), "crane", solutions=SOLUTIONS, words=WORDS,
                 N=5, max_turns=7)


def test_create_solver_unknown_id():
    with pytest.raises(ValueError):
        create_solver("nope")


def test_summarize():
    results = [
        {"success": True, "guesses": 3},
        {"success": True, "guesses": 4},
        {"success": False, "guesses": 6},
    ]
    s = summarize(results)
    assert s["games"] == 3 and s["solved"] == 2
    assert s["solve_rate"] == pytest.approx(2 / 3)
    assert s["mean_guesses"] == pytest.approx(3.5)
    assert s["median_guesses"] == pytest.approx(3.5)
    assert s["max_guesses"] == 4
    assert s["histogram"] == [0, 0, 1, 1, 0, 0]


def test_summarize_empty():
    s = summarize([])
    assert s["games"] == 0 and s["solve_rate"] == 0.0
    assert s["histogram"] == [0] * 6


def test_run_batch_consumes_answers_one_game_at_a_time():
    pulled = []

    def answers():
        for w in ["cranes", "crane", "nerve", "event"]:
            pulled.append(w)
            yield w

    results = run_batch(create_solver("elimination"), answers(), solutions=SOLUTIONS,
                        words=WORDS, N=5, seed=1, sample=2)
    assert [r["answer"] for r in results] == ["crane", "nerve"]
    assert pulled == ["cranes", "crane", "nerve"]
