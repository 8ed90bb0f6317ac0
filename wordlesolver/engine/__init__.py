from .errors import (
    CandidateDriftError,
    InvalidFeedbackFormat,
    InvalidWordFormat,
    NoCandidatesRemain,
    ScoringInvariantError,
    SolverError,
)
from .patterns import SOLVED, WORD_LENGTH, decode_pattern, encode_pattern, is_valid_pattern
from .scoring import evaluate, evaluate_code
from .buckets import BucketTable, partition
from .constraints import filter_candidates
from .validation import is_valid_word, normalize_word

__all__ = [
    "SolverError", "InvalidFeedbackFormat", "InvalidWordFormat", "NoCandidatesRemain",
    "ScoringInvariantError", "CandidateDriftError",
    "SOLVED", "WORD_LENGTH", "encode_pattern", "decode_pattern", "is_valid_pattern",
    "evaluate", "evaluate_code",
    "BucketTable", "partition",
    "filter_candidates",
    "is_valid_word", "normalize_word",
]
