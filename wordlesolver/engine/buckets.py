"""
Partition a candidate set by feedback for a fixed guess.

For guess g, every candidate answer produces exactly one feedback code. The
candidates that share a code form a "bucket"; after playing g and observing
the code, the bucket is exactly the new candidate set.

Buckets live in a fixed 243-slot array indexed by the packed code (see
patterns.py), so the key space is closed and lookups never hash strings.
Empty slots are None and are never exposed as keys.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .patterns import ALL_PATTERNS, NUM_PATTERNS, SOLVED_CODE, encode_pattern, is_valid_pattern
from .scoring import evaluate_code


class BucketTable:
    """
    Feedback code -> ordered list of candidates producing it against `guess`.

    Behaves like a read-only mapping keyed by canonical code strings. Iteration
    is in packed-code order ("00000" first, "22222" last).
    """

    __slots__ = ("guess", "_slots", "_count")

    def __init__(self, guess: str):
        self.guess = guess
        self._slots: List[Optional[List[str]]] = [None] * NUM_PATTERNS
        self._count = 0  # non-empty buckets

    def _add(self, packed: int, word: str) -> None:
        slot = self._slots[packed]
        if slot is None:
            self._slots[packed] = [word]
            self._count += 1
        else:
            slot.append(word)

    # ---- mapping protocol ----
    def _packed(self, code) -> Optional[int]:
        if not is_valid_pattern(code):
            return None
        return encode_pattern(code)

    def __getitem__(self, code: str) -> List[str]:
        packed = self._packed(code)
        slot = None if packed is None else self._slots[packed]
        if not slot:
            raise KeyError(code)
        return slot

    def get(self, code: str, default=None):
        try:
            return self[code]
        except KeyError:
            return default

    def __contains__(self, code) -> bool:
        packed = self._packed(code)
        return packed is not None and bool(self._slots[packed])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> List[str]:
        return [ALL_PATTERNS[i] for i, s in enumerate(self._slots) if s]

    def values(self) -> List[List[str]]:
        return [s for s in self._slots if s]

    def items(self) -> List[Tuple[str, List[str]]]:
        return [(ALL_PATTERNS[i], s) for i, s in enumerate(self._slots) if s]

    # ---- sizes ----
    def sizes(self) -> List[int]:
        """Sizes of all non-empty buckets, in packed-code order."""
        return [len(s) for s in self._slots if s]

    @property
    def exact_count(self) -> int:
        """Size of the all-exact bucket: 1 if the guess is itself a candidate, else 0."""
        slot = self._slots[SOLVED_CODE]
        return len(slot) if slot else 0

    @property
    def total(self) -> int:
        return sum(self.sizes())

    @property
    def worst(self) -> int:
        """Largest bucket size (0 for an empty table)."""
        return max(self.sizes(), default=0)

    def as_dict(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self.items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, BucketTable):
            return NotImplemented
        return self.guess == other.guess and self._slots == other._slots

    def __repr__(self) -> str:
        return f"BucketTable(guess={self.guess!r}, buckets={self._count}, total={self.total})"


def partition(guess: str, candidates: Iterable[str]) -> BucketTable:
    """
    Group `candidates` by the feedback each would give against `guess`.

    Buckets preserve the relative order of `candidates`. Cost is
    O(|candidates| * word length).
    """
    table = BucketTable(guess)
    _code = evaluate_code  # localize for speed
    for answer in candidates:
        table._add(_code(answer, guess), answer)
    return table
