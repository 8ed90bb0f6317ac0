"""
Solver configuration.

One dataclass carries every knob the solver reads. CLIs build it from argparse
flags; tests build it directly. Word lists are NOT configuration here: they are
passed to the Solver explicitly (see datasets.WordLists).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional

# Wordle turn budget; also the threshold for restricting guesses to candidates.
WORDLE_MAX_TURNS = 6

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"
DEFAULT_ANSWERS_PATH = DATA_DIR / "answers_5.txt"
DEFAULT_GUESSES_PATH = DATA_DIR / "guesses_5.txt"


@dataclass
class SolverConfig:
    strategy: str = "expected_left"     # scoring strategy id (see solvers.get_strategy_ids)
    turn_budget: int = WORDLE_MAX_TURNS  # candidates-only guessing when remaining + turns <= this
    opening_guess: Optional[str] = None  # None = derive once per vocabulary via the selector
    seed: Optional[int] = None           # tie-break RNG seed
    workers: int = 1                     # >1 fans guess scoring out across processes

    def validate(self) -> "SolverConfig":
        from wordlesolver.solvers import get_strategy_ids

        if self.strategy not in get_strategy_ids():
            raise ValueError(
                f"Unknown strategy: {self.strategy}. Available: {get_strategy_ids()}")
        if self.turn_budget < 1:
            raise ValueError(f"turn_budget must be positive; got {self.turn_budget}")
        if self.workers < 1:
            raise ValueError(f"workers must be positive; got {self.workers}")
        return self

    def as_dict(self) -> Dict:
        return asdict(self)
