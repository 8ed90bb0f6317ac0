"""
Expected Remaining Candidates (ERC), answer-aware.

Idea:
  Guess g splits the n current candidates into buckets. Let a be the size of
  the all-exact bucket (1 when g is itself a candidate, else 0), m = n - a,
  and n_1..n_k the sizes of the other buckets. The bucket-size entropy of the
  non-winning mass is

      H = log2(m) - (sum_i n_i * log2(n_i)) / m

  and 2**H is the "effective number" of equally sized buckets. The score is
  an estimate of candidates left after playing g:

      a == 1:  m**2 / (m + 1) / 2**H     (0 when m == 0: g is the last word)
      a == 0:  n / 2**H

  The a == 1 branch credits g for winning outright with probability 1/n.
  Lower is better. This is the system-of-record strategy.
"""

from __future__ import annotations

from math import log2

import numpy as np

from .base import ScoringStrategy, register
from wordlesolver.engine import BucketTable, ScoringInvariantError
from wordlesolver.engine.patterns import SOLVED


def bucket_entropy(sizes) -> float:
    """
    log2(m) - sum(n_i log2 n_i) / m for bucket sizes n_i summing to m > 0.

    Sizes are sorted first so that any ordering of the same multiset gives a
    bit-identical result.
    """
    n = np.sort(np.asarray(sizes, dtype=np.float64))
    m = float(n.sum())
    return log2(m) - float(np.sum(n * np.log2(n))) / m


def expected_remaining(sizes, exact: int, total: int) -> float:
    """
    Score from the non-exact bucket `sizes`, the exact-bucket size and the
    candidate count. Raises ScoringInvariantError when there is nothing to score.
    """
    m = total - exact
    if m <= 0:
        if exact:
            return 0.0
        raise ScoringInvariantError(
            f"cannot score an empty partition (total={total}, exact={exact})")

    spread = 2.0 ** bucket_entropy(sizes)
    if exact:
        return m * m / (m + 1) / spread
    return total / spread


@register
class ExpectedLeftStrategy(ScoringStrategy):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "2.0.0"

    def score(self, buckets: BucketTable, total: int) -> float:
        exact = buckets.exact_count
        sizes = [len(v) for k, v in buckets.items() if k != SOLVED]
        return expected_remaining(sizes, exact, total)
