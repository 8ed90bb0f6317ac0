"""
Argument plumbing shared by the CLI entry points.
"""

from __future__ import annotations

import argparse

from wordlesolver.config import DEFAULT_ANSWERS_PATH, DEFAULT_GUESSES_PATH, WORDLE_MAX_TURNS, SolverConfig
from wordlesolver.datasets import WordLists, load_wordlists
from wordlesolver.solvers import STANDARD_OPENING_GUESS, get_strategy_ids


def add_wordlist_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS_PATH),
                    help="path to answers list (possible hidden words)")
    ap.add_argument("--guesses", default=str(DEFAULT_GUESSES_PATH),
                    help="path to extra allowed guesses (never answers)")


def add_solver_args(ap: argparse.ArgumentParser, *, opening_default: str | None = STANDARD_OPENING_GUESS) -> None:
    ap.add_argument("--strategy", default="expected_left",
                    help=f"scoring strategy (one of: {', '.join(get_strategy_ids())})")
    ap.add_argument("--opening", default=opening_default,
                    help="first guess; 'derive' to compute it with the selector "
                         f"(default: {opening_default or 'derive'})")
    ap.add_argument("--turn-budget", type=int, default=WORDLE_MAX_TURNS,
                    help="guess only candidates once remaining + turns taken <= this")
    ap.add_argument("--seed", type=int, help="tie-break RNG seed (for reproducibility)")
    ap.add_argument("--workers", type=int, default=1,
                    help="processes used to score guesses")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    opening = args.opening.strip() if args.opening else args.opening
    if opening is None or opening.lower() == "derive":
        opening = None
    return SolverConfig(
        strategy=args.strategy,
        turn_budget=args.turn_budget,
        opening_guess=opening,
        seed=args.seed,
        workers=args.workers,
    ).validate()


def load_words(args: argparse.Namespace) -> WordLists:
    """Load the configured word lists, exiting with a hint if they are missing."""
    try:
        return load_wordlists(args.answers, args.guesses)
    except FileNotFoundError as e:
        raise SystemExit(
            f"word list not found: {e}. Fetch answers with "
            f"`python -m script.fetch_answers` or pass --answers/--guesses.") from e
