"""
Errors raised by the solver engine.

Every error is raised synchronously to the caller and never retried internally.
The input errors also subclass ValueError so callers that only care about
"bad input" can catch that.
"""

from __future__ import annotations


class SolverError(Exception):
    """Base class for all engine errors."""


class InvalidFeedbackFormat(SolverError, ValueError):
    """Feedback is not exactly 5 symbols drawn from {0, 1, 2}."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"invalid feedback {code!r}: expected 5 characters of 0, 1 or 2")


class InvalidWordFormat(SolverError, ValueError):
    """A word is not exactly 5 alphabetic (a-z) symbols."""

    def __init__(self, word):
        self.word = word
        super().__init__(f"invalid word {word!r}: expected 5 letters a-z")


class NoCandidatesRemain(SolverError):
    """
    Feedback is inconsistent with every remaining candidate.

    Either the feedback was mis-entered or the hidden answer is not in the
    known word lists. The solver cannot continue without caller intervention.
    """

    def __init__(self, guess: str, code: str):
        self.guess = guess
        self.code = code
        super().__init__(f"no candidates remain for guess {guess!r} with feedback {code!r}")


class ScoringInvariantError(SolverError, ArithmeticError):
    """A bucket partition has no mass to score (empty candidate set)."""


class CandidateDriftError(SolverError):
    """
    A solver's candidate set no longer matches the answers consistent with its
    own history. Raised by the game harness; indicates a solver bug, not bad input.
    """

    def __init__(self, history, candidates, expected):
        self.history = list(history)
        self.candidates = tuple(candidates)
        self.expected = tuple(expected)
        super().__init__(f"candidates drifted after {self.history}: "
                         f"have {len(self.candidates)}, history allows {len(self.expected)}")
