"""
Guess selection.

For every word in the guess universe:
  - partition the CURRENT candidates by feedback against it;
  - score the partition with the active strategy (lower is better).
Keep the minimum score and every word achieving it (exact float equality).

Tie-break:
  - prefer minimizers that are themselves candidates (they can win this turn);
  - if none are, keep all minimizers;
  - pick uniformly with the injected RNG.

Scoring different guesses is independent, so with workers > 1 the universe is
split into contiguous chunks scored in separate processes. Chunk results are
reduced in order, giving the same tie set as a sequential scan.
"""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .base import REGISTRY, ScoringStrategy
from wordlesolver.engine import BucketTable, partition

log = logging.getLogger(__name__)

# Below this many guesses per worker, process start-up costs more than it saves
MIN_CHUNK = 256


@dataclass(frozen=True)
class Selection:
    guess: str
    buckets: BucketTable
    score: float
    ties: Tuple[str, ...]  # the set `guess` was drawn from


def _default_strategy() -> ScoringStrategy:
    return REGISTRY["expected_left"]()


def _scan(guesses: Sequence[str], candidates: Sequence[str],
          strategy: ScoringStrategy) -> Tuple[Optional[float], List[str]]:
    """Return (best_score, [words achieving it]) in universe order."""
    total = len(candidates)
    best_score: Optional[float] = None
    best: List[str] = []

    for g in guesses:
        s = strategy.score(partition(g, candidates), total)
        if best_score is None or s < best_score:
            best_score, best = s, [g]
        elif s == best_score:
            best.append(g)

    return best_score, best


def _scan_chunk(args) -> Tuple[Optional[float], List[str]]:
    # Runs in a worker process; the strategy instance is pickled with the job
    guesses, candidates, strategy = args
    return _scan(guesses, candidates, strategy)


def _chunks(words: Sequence[str], n: int) -> List[Sequence[str]]:
    size = -(-len(words) // n)  # ceil
    return [words[i:i + size] for i in range(0, len(words), size)]


def _parallel_scan(guesses: Sequence[str], candidates: Sequence[str],
                   strategy: ScoringStrategy, workers: int) -> Tuple[Optional[float], List[str]]:
    jobs = [(list(chunk), list(candidates), strategy) for chunk in _chunks(guesses, workers)]
    best_score: Optional[float] = None
    best: List[str] = []
    with ProcessPoolExecutor(workers) as executor:
        for s, words in executor.map(_scan_chunk, jobs):
            if s is None:
                continue
            if best_score is None or s < best_score:
                best_score, best = s, list(words)
            elif s == best_score:
                best.extend(words)
    return best_score, best


def select_best(
        candidates: Sequence[str],
        guess_universe: Sequence[str],
        *,
        strategy: Optional[ScoringStrategy] = None,
        rng: Optional[random.Random] = None,
        workers: int = 1,
) -> Selection:
    """
    Pick the guess that minimizes the strategy score against `candidates`.

    Args:
      candidates     : current candidate answers (non-empty)
      guess_universe : words eligible as the guess (non-empty)
      strategy       : scoring strategy; defaults to expected_left
      rng            : tie-break source; pass a seeded Random for reproducible picks
      workers        : number of processes for the scoring scan

    Returns:
      Selection(guess, buckets, score, ties), where `buckets` partitions
      `candidates` by feedback against `guess`.
    """
    if not guess_universe:
        raise ValueError("guess universe is empty")
    if not candidates:
        raise ValueError("no candidates to select against")

    strategy = strategy or _default_strategy()
    rng = rng or random.Random()

    if workers > 1 and len(guess_universe) >= workers * MIN_CHUNK:
        best_score, best = _parallel_scan(guess_universe, candidates, strategy, workers)
    else:
        best_score, best = _scan(guess_universe, candidates, strategy)

    candidate_set = set(candidates)
    winners = [w for w in best if w in candidate_set] or best
    guess = winners[rng.randrange(len(winners))]

    log.debug(f"{strategy.id}: picked {guess!r} (score={best_score:.4f}, "
              f"ties={len(winners)}/{len(best)}) from {len(guess_universe)} guesses "
              f"over {len(candidates)} candidates")

    return Selection(guess=guess, buckets=partition(guess, candidates),
                     score=best_score, ties=tuple(winners))


def rank_guesses(
        candidates: Sequence[str],
        guess_universe: Sequence[str],
        *,
        strategy: Optional[ScoringStrategy] = None,
        limit: Optional[int] = None,
) -> List[Tuple[str, float]]:
    """
    Score every guess and return (guess, score) pairs, best first.
    Equal scores are ordered alphabetically.
    """
    if not candidates:
        raise ValueError("no candidates to rank against")
    strategy = strategy or _default_strategy()
    total = len(candidates)
    scored = [(g, strategy.score(partition(g, candidates), total)) for g in guess_universe]
    scored.sort(key=lambda t: (t[1], t[0]))
    return scored if limit is None else scored[:limit]
