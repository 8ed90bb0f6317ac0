# apps/cli/bench.py
"""
Benchmark scoring strategies by playing simulated games.

This script:
  1) Validates the word lists (prints counts + SHA, flags overlap/invalids).
  2) Loads the lists and picks the cases (all answers, or a seeded sample).
  3) For each requested strategy, plays every case with a fresh solver under a
     progress bar and writes, under <outdir>/<strategy>/:
       - CSV:  per-game results + guess/code/left columns per turn
       - CSV:  one row per guess played (turns)
       - JSON: manifest with config, word-list report, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import List

from tqdm import tqdm

from apps.cli.common import add_wordlist_args, load_words
from wordlesolver.config import WORDLE_MAX_TURNS, SolverConfig
from wordlesolver.datasets import pretty_summary, validate_wordlists
from wordlesolver.harness import (
    build_manifest, new_run_id, run_batch, summarize, write_csv, write_manifest, write_turns_csv,
)
from wordlesolver.harness.core import HARD_TURN_CAP
from wordlesolver.logs import configure_logging
from wordlesolver.solvers import STANDARD_OPENING_GUESS, get_strategy_ids

log = logging.getLogger(__name__)


def _progress(mode: str, desc: str):
    if mode == "off" or (mode == "auto" and not sys.stderr.isatty()):
        return None
    return partial(tqdm, ncols=80, desc=desc, unit="game")


def main(argv: List[str] | None = None) -> int:
    registered = get_strategy_ids()

    ap = argparse.ArgumentParser(description="wordlesolver: benchmark scoring strategies")
    add_wordlist_args(ap)
    ap.add_argument("--strategies", nargs="+", default=["expected_left"],
                    help=f"strategy ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--opening", default=STANDARD_OPENING_GUESS,
                    help="first guess for every game; 'derive' to compute per strategy")
    ap.add_argument("--sample", type=int, help="play only a seeded random subset of answers")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=HARD_TURN_CAP,
                    help="stop a game after this many guesses")
    ap.add_argument("--workers", type=int, default=1, help="processes used to score guesses")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    # 1) Validate once and print a one-liner summary
    rep = validate_wordlists(args.answers, args.guesses)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)

    # 2) Load lists once
    words = load_words(args)

    if len(args.strategies) == 1 and args.strategies[0].lower() == "all":
        todo = registered
    else:
        todo = args.strategies
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown strategy ids: {missing}. Registered: {registered}")

    opening = None if args.opening.lower() == "derive" else args.opening
    outdir = Path(args.outdir)
    run_id = new_run_id()

    # 3) Run each strategy on the same cases
    for sid in todo:
        config = SolverConfig(strategy=sid, opening_guess=opening, workers=args.workers)
        results = run_batch(
            words, config=config, max_turns=args.max_turns,
            sample=args.sample, seed=args.seed, progress=_progress(args.progress, sid),
        )
        summary = summarize(results, max_turns=WORDLE_MAX_TURNS)

        sdir = outdir / sid
        csv_path = write_csv(results, str(sdir / f"run_{run_id}.csv"), max_turns=args.max_turns)
        turns_path = write_turns_csv(results, str(sdir / f"run_{run_id}_turns.csv"))
        manifest = build_manifest(run_id, {**vars(args), "solver": config.as_dict()}, rep, summary)
        manifest_path = write_manifest(manifest, str(sdir / f"run_{run_id}_manifest.json"))

        mean = summary["mean_guesses"]
        print(f"{sid}: solved {summary['solved']}/{summary['games']} "
              f"(mean {mean:.3f}, max {summary['max_guesses']}, "
              f"within {WORDLE_MAX_TURNS}: {summary['within_budget']})"
              if mean is not None else f"{sid}: solved 0/{summary['games']}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {turns_path}")
        print(f"Wrote: {manifest_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
