from __future__ import annotations

from typing import List

from .base import REGISTRY, ScoringStrategy, register

from . import expected_left  # noqa: F401
from . import entropy  # noqa: F401

from .selector import Selection, rank_guesses, select_best
from .opening import STANDARD_OPENING_GUESS, opening_guess, verify_opening_guess
from .solver import Solver, suggest


def create_strategy(strategy_id: str) -> ScoringStrategy:
    """
    Factory: instantiate a registered scoring strategy by id.
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "REGISTRY", "ScoringStrategy", "register", "create_strategy", "get_strategy_ids",
    "Selection", "select_best", "rank_guesses",
    "STANDARD_OPENING_GUESS", "opening_guess", "verify_opening_guess",
    "Solver", "suggest",
]
