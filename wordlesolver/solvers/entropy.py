"""
Entropy strategy (expected information gain).

Main idea:
  - For guess g, partition CURRENT candidates by feedback pattern.
  - Compute Shannon entropy H over the bucket distribution, p_i = n_i / n.
  - Maximize H; returned as -H so that, like every strategy, lower is better.

This ignores the chance that g is itself the answer, so it is a simpler
approximation of expected_left. When guesses are drawn from the candidate
set it is strictly dominated by expected_left; kept as a selectable
alternative and for comparison runs.
"""

from __future__ import annotations

import numpy as np

from .base import ScoringStrategy, register
from wordlesolver.engine import BucketTable, ScoringInvariantError


def shannon_entropy(sizes, total: int) -> float:
    """Entropy in bits of the bucket distribution; sizes sorted for stable floats."""
    if total <= 0:
        raise ScoringInvariantError("cannot compute entropy of an empty partition")
    p = np.sort(np.asarray(sizes, dtype=np.float64)) / total
    return float(-np.sum(p * np.log2(p)))


@register
class EntropyStrategy(ScoringStrategy):
    id = "entropy"
    name = "Entropy (Expected Information Gain)"
    version = "2.0.0"

    def score(self, buckets: BucketTable, total: int) -> float:
        return -shannon_entropy(buckets.sizes(), total)
