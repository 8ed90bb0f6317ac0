"""
Experiment harness core primitives.

- play_game:  run a single puzzle (one hidden answer) with a Solver.
- run_batch:  run many puzzles, one fresh solver per game.
- summarize:  aggregate a batch into guess-count statistics.

A game is a loop of: read solver.current_guess, score it against the hidden
answer with the engine, feed the code back. The turn limit is enforced here,
not in the solver. These functions are UI-agnostic so they can be reused by a
CLI app, a notebook, or tests.
"""

from __future__ import annotations

import logging
import random
import time
from collections import Counter
from typing import Dict, Iterable, List, Optional

from wordlesolver.config import WORDLE_MAX_TURNS, SolverConfig
from wordlesolver.datasets import WordLists
from wordlesolver.engine import SOLVED, CandidateDriftError, evaluate, filter_candidates
from wordlesolver.solvers import Solver

log = logging.getLogger(__name__)

# Games may run past the Wordle budget so benchmarks can report the true tail
HARD_TURN_CAP = 20


def play_game(solver: Solver, answer: str, *, max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Execute one game until the solver finds `answer` or `max_turns` guesses
    have been played. The solver is used as-is (call solver.reset() to reuse one).

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, code)]),
            left (list[int]): candidates remaining when each guess was played

    Raises:
        CandidateDriftError if the solver's candidates ever differ from the
        answers consistent with its history.
    """
    if not 1 <= max_turns <= HARD_TURN_CAP:
        raise ValueError(f"max_turns must be in 1..{HARD_TURN_CAP}; got {max_turns}")

    history = []
    left = []
    success = False
    total_ms = 0.0

    for _ in range(max_turns):
        guess = solver.current_guess
        left.append(solver.remaining)
        code = evaluate(answer, guess)
        history.append((guess, code))
        if code == SOLVED:
            success = True
            break

        t0 = time.perf_counter_ns()
        solver.apply_feedback(code)
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        # Bucket bookkeeping must agree with filtering the answers from scratch
        expected = filter_candidates(solver.words.answers, solver.history)
        if list(solver.candidates) != expected:
            raise CandidateDriftError(solver.history, solver.candidates, expected)

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": total_ms,
        "history": history,
        "left": left,
    }


def run_batch(
        words: WordLists,
        answers: Iterable[str] | None = None,
        *,
        config: SolverConfig | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
        seed: int | None = None,
        progress=None,
) -> List[Dict]:
    """
    Play one game per hidden answer (default: every word in words.answers).

    If `sample` is given, a seeded random subset of that size is played.
    Each game gets its own solver seeded from the base seed (seed + index),
    so runs are reproducible but not identical across cases. `progress` is an
    optional wrapper for the case iterable (e.g. tqdm).
    """
    config = config or SolverConfig()
    cases = list(answers if answers is not None else words.answers)
    if sample is not None and sample < len(cases):
        cases = random.Random(seed).sample(cases, sample)

    iterator = progress(cases) if progress else cases
    out: List[Dict] = []
    for idx, ans in enumerate(iterator, start=1):
        case_seed = None if seed is None else seed + idx
        solver = Solver(words, config, rng=random.Random(case_seed))
        r = play_game(solver, ans, max_turns=max_turns)
        r["strategy"] = solver.strategy.id
        out.append(r)
    log.info(f"played {len(out)} games with {config.strategy}")
    return out


def summarize(results: List[Dict], *, max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """Success rate, mean/max guesses over solved games, and a guess histogram."""
    solved = [r["guesses"] for r in results if r["success"]]
    return {
        "games": len(results),
        "solved": len(solved),
        "success_rate": (len(solved) / len(results)) if results else 0.0,
        "mean_guesses": (sum(solved) / len(solved)) if solved else None,
        "max_guesses": max(solved) if solved else None,
        "within_budget": sum(1 for g in solved if g <= max_turns),
        "histogram": dict(sorted(Counter(solved).items())),
    }


def replay_candidates(words: WordLists, history) -> List[str]:
    """Answers consistent with `history`, derived without a solver."""
    return filter_candidates(words.answers, history)


def first_inconsistent(words: WordLists, history) -> Optional[int]:
    """
    Index of the first (guess, code) in `history` after which no answer
    remains, or None if the whole history is consistent.
    """
    for i in range(1, len(history) + 1):
        if not replay_candidates(words, history[:i]):
            return i - 1
    return None
