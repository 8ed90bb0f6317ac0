"""
Feedback for a single (answer, guess) pair.

Conventions (see patterns.py):
  - '2' : exact   = correct letter in the correct position
  - '1' : present = correct letter in the wrong position
  - '0' : absent  = letter not present (or present fewer times than guessed)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters from the answer.
  2) Second pass, in position order, marks a letter present only if it still
     has remaining count in the answer, consuming one instance.

A guess letter is therefore marked present/exact at most as many times as it
occurs in the answer, and exact matches are never demoted by repeats elsewhere.
"""

from __future__ import annotations

from collections import Counter

from .patterns import ABSENT, EXACT, PRESENT, pack_digits


def _digits(answer: str, guess: str) -> list:
    if len(guess) != len(answer):
        raise ValueError(f"guess {guess!r} and answer {answer!r} differ in length")

    n = len(guess)
    digits = [ABSENT] * n

    # Pass 1: exact matches; collect leftover counts from the answer
    remaining = Counter()
    for i, (a, g) in enumerate(zip(answer, guess)):
        if g == a:
            digits[i] = EXACT
        else:
            remaining[a] += 1

    # Pass 2: present marks, capped by the leftover multiplicity
    for i, g in enumerate(guess):
        if digits[i] == EXACT:
            continue
        if remaining[g] > 0:
            digits[i] = PRESENT
            remaining[g] -= 1

    return digits


def evaluate(answer: str, guess: str) -> str:
    """
    Feedback code for playing `guess` when the hidden word is `answer`.

    Both words must already be normalized (lowercase, same length).

    Examples:
      evaluate("crane", "eerie") -> "00102"
      evaluate("crane", "crane") -> "22222"
      evaluate("level", "belle") -> "02111"
    """
    return "".join(str(d) for d in _digits(answer, guess))


def evaluate_code(answer: str, guess: str) -> int:
    """Same as evaluate() but returns the packed integer form."""
    return pack_digits(_digits(answer, guess))
