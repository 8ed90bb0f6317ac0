"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the answers list)
  - a history of (guess, feedback) pairs

Return:
  - words that are consistent with ALL feedback seen so far.

The solver narrows candidates through bucket lookups instead; this is the
independent, history-based way to reach the same set, used by the harness and
tests to cross-check the solver's bookkeeping.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .scoring import evaluate

# History is a sequence of (guess, feedback) tuples
History = Iterable[Tuple[str, str]]


def is_consistent(word: str, history: History) -> bool:
    """True if `word`, as the answer, would reproduce every recorded feedback."""
    return all(evaluate(word, g) == code for g, code in history)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded feedback for
    every (guess, code) in `history`. Order is preserved as in `words`.
    """
    history = list(history)
    return [w for w in words if is_consistent(w, history)]
