import random
from collections import Counter

import pytest

from wordlesolver.engine import partition
from wordlesolver.solvers import ScoringStrategy, create_strategy, rank_guesses, select_best
from wordlesolver.solvers.base import REGISTRY
from wordlesolver.solvers.selector import _chunks, _parallel_scan, _scan

from conftest import ANSWERS, GUESSES


class FlatStrategy(ScoringStrategy):
    """Every guess ties: isolates the tie-break policy."""
    id = "flat"

    def score(self, buckets, total):
        return 1.0


def test_route_fully_disambiguates_three_words():
    cands = ["adieu", "route", "crane"]
    sel = select_best(cands, cands, rng=random.Random(0))
    assert "route" in sel.ties
    assert sel.guess in sel.ties
    assert sel.score == pytest.approx(2 / 3)
    assert sel.buckets == partition(sel.guess, cands)


def test_selection_partitions_candidates():
    sel = select_best(ANSWERS, ANSWERS + GUESSES, rng=random.Random(1))
    members = [w for b in sel.buckets.values() for w in b]
    assert Counter(members) == Counter(ANSWERS)
    assert sel.buckets.guess == sel.guess


def test_selected_guess_has_minimum_score():
    universe = ANSWERS + GUESSES
    sel = select_best(ANSWERS, universe, rng=random.Random(2))
    ranked = rank_guesses(ANSWERS, universe)
    assert ranked[0][1] == sel.score
    assert all(s >= sel.score for _, s in ranked)


def test_tie_break_prefers_candidates():
    sel = select_best(["crane", "route"], ["nymph", "route", "fjord"],
                      strategy=FlatStrategy(), rng=random.Random(3))
    assert sel.guess == "route"
    assert sel.ties == ("route",)


def test_tie_break_keeps_all_when_no_candidate_ties():
    sel = select_best(["crane", "route"], ["nymph", "fjord"], strategy=FlatStrategy(),
                      rng=random.Random(4))
    assert sel.ties == ("nymph", "fjord")
    assert sel.guess in sel.ties


def test_seeded_rng_is_reproducible():
    cands = ["adieu", "route", "crane"]
    picks = {select_best(cands, cands, rng=random.Random(42)).guess for _ in range(5)}
    assert len(picks) == 1


def test_empty_inputs_rejected():
    with pytest.raises(ValueError):
        select_best(ANSWERS, [])
    with pytest.raises(ValueError):
        select_best([], ANSWERS)


def test_entropy_strategy_selects_too():
    sel = select_best(ANSWERS, ANSWERS + GUESSES, strategy=create_strategy("entropy"),
                      rng=random.Random(5))
    assert sel.guess in ANSWERS + GUESSES
    assert sel.score < 0


def test_rank_guesses_limit_and_order():
    ranked = rank_guesses(ANSWERS, ANSWERS + GUESSES, limit=5)
    assert len(ranked) == 5
    assert ranked == sorted(ranked, key=lambda t: (t[1], t[0]))


def test_chunks_cover_universe_in_order():
    universe = ANSWERS + GUESSES
    chunks = _chunks(universe, 3)
    assert len(chunks) == 3
    assert [w for c in chunks for w in c] == universe


def test_parallel_scan_matches_sequential():
    universe = ANSWERS + GUESSES
    strategy = create_strategy("expected_left")
    assert _parallel_scan(universe, ANSWERS, strategy, 2) == _scan(universe, ANSWERS, strategy)


def test_parallel_scan_runs_unregistered_strategy():
    universe = ANSWERS + GUESSES
    assert "flat" not in REGISTRY
    best_score, best = _parallel_scan(universe, ANSWERS, FlatStrategy(), 2)
    assert (best_score, best) == _scan(universe, ANSWERS, FlatStrategy())
    assert best == universe
