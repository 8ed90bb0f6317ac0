from __future__ import annotations

from typing import Dict, Type

from wordlesolver.engine import BucketTable

# ---- Global strategy registry ----
REGISTRY: Dict[str, Type["ScoringStrategy"]] = {}


def register(cls: Type["ScoringStrategy"]) -> Type["ScoringStrategy"]:
    """
    Decorator: @register on a strategy class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate strategy id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that scoring strategies inherit ----
class ScoringStrategy:
    """
    Ranks a guess from the bucket partition it induces on the candidates.

    score() returns a float where LOWER IS BETTER. The selector compares
    scores with exact equality, so a strategy must return bit-identical
    floats for partitions with the same multiset of bucket sizes.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def score(self, buckets: BucketTable, total: int) -> float:
        raise NotImplementedError("Override in subclass")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
