"""
Feedback codes.

Canonical form is a 5-character string, one symbol per letter position:
  - '0' : absent  (letter not in answer, or present fewer times than guessed)
  - '1' : present (letter in answer, wrong position)
  - '2' : exact   (letter in the right position)

Every code also has a packed integer form: the five ternary digits read as a
base-3 number, most significant digit first. There are 3**5 = 243 codes, so
"00000" -> 0 and "22222" -> 242. Bucket tables index fixed arrays by it.
"""

from __future__ import annotations

import re
from typing import List

from .errors import InvalidFeedbackFormat

WORD_LENGTH = 5
NUM_PATTERNS = 3 ** WORD_LENGTH  # 243

ABSENT, PRESENT, EXACT = 0, 1, 2

SOLVED = "2" * WORD_LENGTH
SOLVED_CODE = NUM_PATTERNS - 1

_PATTERN_RE = re.compile(r"[0-2]{%d}" % WORD_LENGTH)

# Place values for packing, most significant first: 81, 27, 9, 3, 1
_PLACES = tuple(3 ** (WORD_LENGTH - 1 - i) for i in range(WORD_LENGTH))


def is_valid_pattern(code) -> bool:
    """True iff `code` is a 5-character string over {0, 1, 2}."""
    return isinstance(code, str) and _PATTERN_RE.fullmatch(code) is not None


def check_pattern(code) -> str:
    """Return `code` unchanged, or raise InvalidFeedbackFormat."""
    if not is_valid_pattern(code):
        raise InvalidFeedbackFormat(code)
    return code


def pack_digits(digits: List[int]) -> int:
    """Pack a list of per-position ternary digits into an int in [0, 243)."""
    out = 0
    for d in digits:
        out = out * 3 + d
    return out


def encode_pattern(code: str) -> int:
    """
    Packed integer for a canonical feedback string.

    Examples:
      encode_pattern("00000") -> 0
      encode_pattern("00102") -> 11
      encode_pattern("22222") -> 242
    """
    check_pattern(code)
    return sum(int(ch) * place for ch, place in zip(code, _PLACES))


def decode_pattern(packed: int) -> str:
    """Inverse of encode_pattern."""
    if not 0 <= packed < NUM_PATTERNS:
        raise ValueError(f"packed feedback out of range: {packed}")
    digits = []
    for place in _PLACES:
        d, packed = divmod(packed, place)
        digits.append(str(d))
    return "".join(digits)


# Lookup table: packed -> string, built once
ALL_PATTERNS = tuple(decode_pattern(i) for i in range(NUM_PATTERNS))
