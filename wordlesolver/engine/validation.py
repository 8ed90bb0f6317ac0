"""
Lightweight word validation.

This module answers the question: "Is this a well-formed word?"
A word is valid iff:
  - it is a string
  - it is alphabetic A-Z / a-z only (no surrounding whitespace)
  - it has exact length 5

Case is folded to lowercase; nothing else is cleaned up. Callers reading
from a terminal or a file strip their own input first.

Membership in a vocabulary is a separate question (`is_allowed`); an override
guess only has to be well-formed, since a human may try any word.
"""

from __future__ import annotations

import re
from typing import Iterable

from .errors import InvalidWordFormat
from .patterns import WORD_LENGTH

_WORD_RE = re.compile(r"[A-Za-z]{%d}" % WORD_LENGTH)


def is_valid_word(word) -> bool:
    return isinstance(word, str) and _WORD_RE.fullmatch(word) is not None


def normalize_word(word) -> str:
    """
    Return the canonical (lowercase) form of `word`.

    Raises:
      InvalidWordFormat if `word` is not exactly 5 letters A-Z / a-z.
    """
    if not is_valid_word(word):
        raise InvalidWordFormat(word)
    return word.lower()


def is_allowed(word, allowed: Iterable[str]) -> bool:
    """
    True if `word` is well-formed and appears in `allowed` (case-normalized).

    Notes:
      - `allowed` can be a large list; we build a local set here. If you're
        calling this in a tight loop, pass a set built once at a higher level.
    """
    if not is_valid_word(word):
        return False
    allowed_set = allowed if isinstance(allowed, (set, frozenset)) else {a.strip().lower() for a in allowed}
    return word.lower() in allowed_set
