# apps/cli/opening.py
"""
Rank opening guesses, and re-check a recorded opening against the selector.

    python -m apps.cli.opening --top 10
    python -m apps.cli.opening --verify soare

Deriving an opening scores every allowed word against every answer, so this
takes a while on the full lists; --workers spreads the scan over processes.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from apps.cli.common import add_wordlist_args, load_words
from wordlesolver.logs import configure_logging
from wordlesolver.solvers import create_strategy, get_strategy_ids, rank_guesses, verify_opening_guess


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordlesolver: opening-guess book")
    add_wordlist_args(ap)
    ap.add_argument("--strategy", default="expected_left",
                    help=f"scoring strategy (one of: {', '.join(get_strategy_ids())})")
    ap.add_argument("--top", type=int, default=10, help="how many ranked openings to print")
    ap.add_argument("--verify", metavar="WORD", help="exit non-zero unless WORD is optimal")
    ap.add_argument("--workers", type=int, default=1, help="processes used by --verify")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    words = load_words(args)

    if args.verify:
        ok = verify_opening_guess(args.verify, words, args.strategy, workers=args.workers)
        print(f"{args.verify.lower()}: {'optimal' if ok else 'NOT optimal'} for {args.strategy}")
        return 0 if ok else 1

    ranked = rank_guesses(words.answers, words.allowed,
                          strategy=create_strategy(args.strategy), limit=args.top)
    answers = set(words.answers)
    for i, (guess, score) in enumerate(ranked, 1):
        flag = "*" if guess in answers else " "
        print(f"{i:3d}. {guess}{flag} {score:10.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
