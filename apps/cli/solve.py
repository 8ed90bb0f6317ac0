# apps/cli/solve.py
"""
Interactive solving session.

The solver prints its guess; you play it in the game and type back the
feedback as five digits:
  0 = grey (absent), 1 = yellow (wrong position), 2 = green (exact).

Other inputs:
  !word   play `word` instead of the suggestion
  ?       list the remaining candidates (when there are few)
  reset   start a new game
  quit    leave

With --history, replays recorded turns (guess=code ...) and prints the next
suggestion without prompting.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Tuple

from apps.cli.common import add_solver_args, add_wordlist_args, config_from_args, load_words
from wordlesolver.engine import NoCandidatesRemain, SOLVED, SolverError
from wordlesolver.engine.validation import is_allowed
from wordlesolver.harness import first_inconsistent
from wordlesolver.logs import configure_logging
from wordlesolver.solvers import Solver, suggest

log = logging.getLogger(__name__)

SHOW_CANDIDATES_MAX = 20


def parse_history(items: List[str]) -> List[Tuple[str, str]]:
    """['soare=00102', ...] -> [('soare', '00102'), ...]"""
    out = []
    for item in items:
        guess, sep, code = item.partition("=")
        if not sep:
            raise ValueError(f"expected guess=code, got {item!r}")
        out.append((guess.strip(), code.strip()))
    return out


def interact(solver: Solver, read: Callable[[str], str] = input,
             write: Callable[[str], None] = print) -> int:
    """
    Run the prompt loop until 'quit' or end of input.
    Returns the number of games solved in the session.
    """
    solved = 0
    write(f"Guess: {solver.current_guess.upper()}  ({solver.remaining} candidates)")

    while True:
        try:
            line = read("feedback> ").strip().lower()
        except EOFError:
            break

        if not line:
            continue
        if line in ("q", "quit", "exit"):
            break
        if line == "reset":
            solver.reset()
            write(f"Guess: {solver.current_guess.upper()}  ({solver.remaining} candidates)")
            continue
        if line == "?":
            if solver.remaining <= SHOW_CANDIDATES_MAX:
                write(" ".join(solver.candidates))
            else:
                write(f"{solver.remaining} candidates")
            continue

        try:
            if line.startswith("!"):
                guess = solver.override_next_guess(line[1:].strip())
                if not is_allowed(guess, set(solver.words.allowed)):
                    write(f"note: {guess} is not in the word lists")
                write(f"Guess: {guess.upper()}  ({len(solver.buckets)} possible outcomes)")
                continue

            nxt = solver.apply_feedback(line)
        except NoCandidatesRemain as e:
            history = solver.history + [(e.guess, e.code)]
            bad = first_inconsistent(solver.words, history)
            where = f" (turn {bad + 1}: {history[bad][0]} = {history[bad][1]})" if bad is not None else ""
            write(f"error: {e}. Check the feedback{where}, or type 'reset'.")
            continue
        except SolverError as e:
            write(f"error: {e}")
            continue

        if line == SOLVED:
            solved += 1
            write(f"Solved in {solver.guess_count}: {nxt.upper()}. Type 'reset' for a new game.")
        else:
            write(f"Guess: {nxt.upper()}  ({solver.remaining} candidates)")

    return solved


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordlesolver: interactive next-guess assistant")
    add_wordlist_args(ap)
    add_solver_args(ap)
    ap.add_argument("--history", nargs="+", metavar="GUESS=CODE",
                    help="replay these turns and print the next suggestion")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    words = load_words(args)
    config = config_from_args(args)
    log.debug(f"loaded {len(words.answers)} answers, {len(words.allowed)} allowed guesses")

    if args.history:
        try:
            print(suggest(words, parse_history(args.history), config))
        except (SolverError, ValueError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0

    interact(Solver(words, config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
