"""
Turn-by-turn solver.

A Solver owns the live candidate set and the turn counter. It is always
waiting for feedback on its current guess:

  - apply_feedback(code): the bucket stored for `code` becomes the candidate
    set, the turn counter advances, and the selector picks the next guess
    (and its bucket table).
  - override_next_guess(word): play a caller-chosen word instead; its bucket
    table is recomputed so the next apply_feedback stays consistent.

Guess universe policy, re-evaluated every turn: once the remaining candidates
plus turns already taken fit within the turn budget, only candidates are
offered (favoring guesses that can win outright); otherwise the full allowed
vocabulary is scanned.

A Solver is not safe for concurrent mutation; serialize calls per instance.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from .base import REGISTRY
from .opening import opening_guess
from .selector import select_best
from wordlesolver.config import SolverConfig
from wordlesolver.datasets import WordLists
from wordlesolver.engine import BucketTable, NoCandidatesRemain, SOLVED, normalize_word, partition
from wordlesolver.engine.patterns import check_pattern

log = logging.getLogger(__name__)


class Solver:

    def __init__(self, words: WordLists, config: SolverConfig | None = None, *,
                 rng: random.Random | None = None):
        if not words.answers:
            raise ValueError("cannot solve with an empty answer list")
        self.words = words
        self.config = (config or SolverConfig()).validate()
        self.strategy = REGISTRY[self.config.strategy]()
        self.rng = rng or random.Random(self.config.seed)
        self.reset()

    def reset(self) -> None:
        """Back to turn 0: every answer is a candidate, opening guess queued."""
        self._candidates: List[str] = list(self.words.answers)
        self._guess_count = 0
        self._history: List[Tuple[str, str]] = []

        opening = self.config.opening_guess
        if opening is None:
            opening = opening_guess(self.words, self.strategy.id, workers=self.config.workers)
        self._set_guess(normalize_word(opening))

    # ---- read-only state ----
    @property
    def current_guess(self) -> str:
        return self._current_guess

    @property
    def buckets(self) -> BucketTable:
        return self._buckets

    @property
    def candidates(self) -> Tuple[str, ...]:
        return tuple(self._candidates)

    @property
    def remaining(self) -> int:
        return len(self._candidates)

    @property
    def guess_count(self) -> int:
        return self._guess_count

    @property
    def history(self) -> List[Tuple[str, str]]:
        """(guess, feedback) pairs applied so far."""
        return list(self._history)

    @property
    def solved(self) -> bool:
        return bool(self._history) and self._history[-1][1] == SOLVED

    # ---- transitions ----
    def apply_feedback(self, code: str) -> str:
        """
        Narrow the candidates with the feedback for the current guess.

        Returns:
          the next guess (the solved word itself once `code` is all-exact).

        Raises:
          InvalidFeedbackFormat if `code` is not 5 symbols over {0, 1, 2}.
          NoCandidatesRemain if no remaining candidate yields `code`.
        """
        check_pattern(code)
        bucket = self._buckets.get(code)
        if not bucket:
            raise NoCandidatesRemain(self._current_guess, code)

        candidates = list(bucket)
        guess_count = self._guess_count + 1
        sel = select_best(candidates, self._guess_universe(candidates, guess_count),
                          strategy=self.strategy, rng=self.rng, workers=self.config.workers)

        # Commit the turn only once the next guess exists
        played, before = self._current_guess, len(self._candidates)
        self._history.append((played, code))
        self._candidates = candidates
        self._guess_count = guess_count
        self._current_guess = sel.guess
        self._buckets = sel.buckets

        log.debug(f"turn {guess_count}: {played} -> {code}, "
                  f"{before} -> {len(candidates)} candidates, next {sel.guess!r}")
        return self._current_guess

    def override_next_guess(self, word: str) -> str:
        """
        Play `word` next instead of the selector's choice.

        Raises:
          InvalidWordFormat if `word` is not exactly 5 letters a-z.
        """
        self._set_guess(normalize_word(word))
        log.debug(f"turn {self._guess_count}: guess overridden to {self._current_guess!r}")
        return self._current_guess

    # ---- internals ----
    def _set_guess(self, word: str) -> None:
        self._current_guess = word
        self._buckets = partition(word, self._candidates)

    def _guess_universe(self, candidates: List[str], guess_count: int) -> Sequence[str]:
        if len(candidates) + guess_count <= self.config.turn_budget:
            return candidates
        return self.words.allowed

    def __repr__(self) -> str:
        return (f"Solver(guess={self._current_guess!r}, remaining={self.remaining}, "
                f"guess_count={self._guess_count}, strategy={self.strategy.id!r})")


def suggest(words: WordLists, history: Sequence[Tuple[str, str]],
            config: Optional[SolverConfig] = None, *, rng: random.Random | None = None) -> str:
    """
    Replay a full (guess, feedback) history on a fresh solver and return the
    next suggested guess. Guesses that differ from the solver's own choice are
    applied as overrides.
    """
    solver = Solver(words, config, rng=rng)
    for guess, code in history:
        if normalize_word(guess) != solver.current_guess:
            solver.override_next_guess(guess)
        solver.apply_feedback(code)
    return solver.current_guess
