import random

import pytest

from wordlesolver.config import SolverConfig
from wordlesolver.engine import (
    InvalidFeedbackFormat, InvalidWordFormat, NoCandidatesRemain, SOLVED, evaluate,
    filter_candidates, partition,
)
from wordlesolver.solvers import Solver, opening_guess, suggest, verify_opening_guess
import wordlesolver.solvers.solver as solver_mod

from conftest import ANSWERS


def _solver(words, **kw):
    kw.setdefault("opening_guess", "soare")
    kw.setdefault("seed", 1)
    return Solver(words, SolverConfig(**kw))


def test_initial_state(words):
    s = _solver(words)
    assert s.current_guess == "soare"
    assert s.guess_count == 0
    assert s.remaining == len(ANSWERS)
    assert s.candidates == tuple(ANSWERS)
    assert s.buckets == partition("soare", ANSWERS)
    assert s.history == []
    assert s.solved is False


def test_apply_feedback_narrows_to_bucket(words):
    s = _solver(words)
    code = evaluate("crate", "soare")
    expected = partition("soare", ANSWERS)[code]
    nxt = s.apply_feedback(code)
    assert s.candidates == tuple(expected)
    assert s.guess_count == 1
    assert nxt == s.current_guess
    assert s.buckets == partition(nxt, list(expected))
    assert s.history == [("soare", code)]


@pytest.mark.parametrize("answer", ANSWERS)
def test_monotonic_shrinkage_keeps_answer(words, answer):
    s = _solver(words)
    history = []
    for _ in range(10):
        code = evaluate(answer, s.current_guess)
        history.append((s.current_guess, code))
        before = s.remaining
        s.apply_feedback(code)
        assert answer in s.candidates
        assert list(s.candidates) == filter_candidates(ANSWERS, history)
        if code == SOLVED:
            assert s.solved and s.current_guess == answer and s.remaining == 1
            break
        assert s.remaining < before
    else:
        pytest.fail(f"{answer} not solved")


@pytest.mark.parametrize("code", ["999", "12", "abcde", "222222", "22222\n", "00000\n", ""])
def test_invalid_feedback_rejected(words, code):
    s = _solver(words)
    with pytest.raises(InvalidFeedbackFormat):
        s.apply_feedback(code)
    assert s.guess_count == 0 and s.remaining == len(ANSWERS)
    assert s.history == [] and s.current_guess == "soare"


def test_winning_feedback_with_trailing_newline_is_rejected(tiny_words):
    s = Solver(tiny_words, SolverConfig(opening_guess="crane", seed=0))
    with pytest.raises(InvalidFeedbackFormat):
        s.apply_feedback(SOLVED + "\n")
    assert s.history == [] and not s.solved
    s.apply_feedback(SOLVED)
    assert s.solved and s.history == [("crane", SOLVED)]


def test_inconsistent_feedback(words):
    s = _solver(words)
    # soare is not an answer, so nothing can be all-exact against it
    with pytest.raises(NoCandidatesRemain) as exc:
        s.apply_feedback(SOLVED)
    assert exc.value.guess == "soare" and exc.value.code == SOLVED
    assert s.guess_count == 0 and s.remaining == len(ANSWERS)


def test_override_next_guess(words):
    s = _solver(words)
    s.apply_feedback(evaluate("level", "soare"))
    assert s.override_next_guess("BeLLe") == "belle"
    assert s.current_guess == "belle"
    assert s.buckets == partition("belle", list(s.candidates))
    s.apply_feedback(evaluate("level", "belle"))
    assert "level" in s.candidates


def test_override_rejects_bad_word(words):
    s = _solver(words)
    for bad in ["ab1de", " crane", "crane\n", "cra ne"]:
        with pytest.raises(InvalidWordFormat):
            s.override_next_guess(bad)
    assert s.current_guess == "soare"


def test_override_accepts_word_outside_vocabulary(words):
    s = _solver(words)
    assert s.override_next_guess("zzzzz") == "zzzzz"
    assert len(s.buckets) == 1


def test_guess_universe_policy_reevaluated_each_turn(words, monkeypatch):
    seen = []
    real = solver_mod.select_best

    def spy(candidates, universe, **kw):
        seen.append((len(candidates), universe is words.allowed))
        return real(candidates, universe, **kw)

    monkeypatch.setattr(solver_mod, "select_best", spy)

    s = _solver(words, turn_budget=3)
    s.override_next_guess("whizz")             # learns almost nothing
    s.apply_feedback(evaluate("crane", "whizz"))
    assert seen[-1] == (s.remaining, True)      # many candidates: full vocabulary

    while not s.solved:
        s.apply_feedback(evaluate("crane", s.current_guess))
        n, full = seen[-1]
        assert full == (n + s.guess_count > 3)


def test_candidates_only_when_few_remain(tiny_words):
    s = Solver(tiny_words, SolverConfig(opening_guess="nymph", seed=0))
    s.apply_feedback(evaluate("route", "nymph"))   # adieu, route
    assert s.current_guess in ("adieu", "route")


def test_failed_selection_leaves_state_untouched(words, monkeypatch):
    s = _solver(words)
    s.apply_feedback(evaluate("crane", "soare"))
    before = (s.guess_count, s.history, s.candidates, s.current_guess, s.buckets)

    def broken(*args, **kw):
        raise RuntimeError("worker pool died")

    monkeypatch.setattr(solver_mod, "select_best", broken)
    with pytest.raises(RuntimeError):
        s.apply_feedback(evaluate("crane", s.current_guess))
    assert (s.guess_count, s.history, s.candidates, s.current_guess, s.buckets) == before

    monkeypatch.undo()
    s.apply_feedback(evaluate("crane", s.current_guess))
    assert s.guess_count == 2 and "crane" in s.candidates


def test_reset(words):
    s = _solver(words)
    s.apply_feedback(evaluate("crane", "soare"))
    s.reset()
    assert s.guess_count == 0 and s.current_guess == "soare" and s.remaining == len(ANSWERS)


def test_seeded_solvers_agree(words):
    a = Solver(words, SolverConfig(opening_guess="soare"), rng=random.Random(9))
    b = Solver(words, SolverConfig(opening_guess="soare"), rng=random.Random(9))
    code = evaluate("alter", "soare")
    assert a.apply_feedback(code) == b.apply_feedback(code)


def test_derived_opening_is_memoized(words):
    first = opening_guess(words)
    assert opening_guess(words) == first
    assert verify_opening_guess(first, words)
    s = Solver(words, SolverConfig(seed=0))
    assert s.current_guess == first


def test_config_validation(words):
    with pytest.raises(ValueError):
        Solver(words, SolverConfig(strategy="nope"))
    with pytest.raises(ValueError):
        Solver(words, SolverConfig(turn_budget=0))
    with pytest.raises(ValueError):
        SolverConfig(workers=0).validate()


def test_suggest_replays_history(words):
    history = [("soare", evaluate("cools", "soare"))]
    s = _solver(words)
    expected = s.apply_feedback(history[0][1])
    assert suggest(words, history, SolverConfig(opening_guess="soare", seed=1)) == expected


def test_suggest_applies_overrides(words):
    history = [("crane", evaluate("abbey", "crane"))]
    nxt = suggest(words, history, SolverConfig(opening_guess="soare", seed=1))
    cands = filter_candidates(ANSWERS, history)
    assert nxt in cands or nxt in words.allowed
