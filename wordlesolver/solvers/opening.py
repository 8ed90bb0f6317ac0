"""
Opening-guess book.

The first guess depends only on the vocabulary and the strategy, and deriving
it is the most expensive scan of a game (every allowed word against every
answer). So it is derived once per (vocabulary fingerprint, strategy) with the
same selector every later turn uses, and memoized for the process lifetime.

STANDARD_OPENING_GUESS is the recorded result for the standard lists
(2315 answers, 12972 allowed guesses). Re-check it with verify_opening_guess()
or `wordlesolver-opening --verify soare` whenever those lists change.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, Tuple

from .base import REGISTRY
from .selector import select_best
from wordlesolver.datasets import WordLists
from wordlesolver.engine import normalize_word

log = logging.getLogger(__name__)

STANDARD_OPENING_GUESS = "soare"

# Fixed seed so the derived opening is reproducible across processes
OPENING_SEED = 0

_BOOK: Dict[Tuple[str, str], str] = {}


def _derive(words: WordLists, strategy_id: str, workers: int):
    return select_best(
        words.answers, words.allowed,
        strategy=REGISTRY[strategy_id](),
        rng=random.Random(OPENING_SEED),
        workers=workers,
    )


def opening_guess(words: WordLists, strategy_id: str = "expected_left", *, workers: int = 1) -> str:
    """Best first guess for `words`, derived on first use and then memoized."""
    key = (words.fingerprint, strategy_id)
    if key not in _BOOK:
        t0 = time.perf_counter()
        sel = _derive(words, strategy_id, workers)
        log.info(f"derived opening {sel.guess!r} for {strategy_id} over "
                 f"{len(words.answers)} answers / {len(words.allowed)} guesses "
                 f"in {time.perf_counter() - t0:.2f}s")
        _BOOK[key] = sel.guess
    return _BOOK[key]


def verify_opening_guess(word: str, words: WordLists, strategy_id: str = "expected_left",
                         *, workers: int = 1) -> bool:
    """True if `word` is among the selector's optimal first moves for `words`."""
    sel = _derive(words, strategy_id, workers)
    ok = normalize_word(word) in sel.ties
    if not ok:
        log.warning(f"opening {word!r} is not optimal for {strategy_id}; "
                    f"selector prefers {sel.ties[:5]} (score={sel.score:.4f})")
    return ok


def clear_opening_book() -> None:
    _BOOK.clear()
