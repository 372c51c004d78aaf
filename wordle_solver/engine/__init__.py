from .errors import SolverError, InvalidLength, EmptyCandidateSet, IndexOutOfRange
from .types import Correctness, Guess, is_solved, parse_pattern
from .scoring import score, score_pattern
from .constraints import ConstraintSet, retain_consistent, is_consistent
from .validation import is_valid_word

__all__ = [
    "SolverError", "InvalidLength", "EmptyCandidateSet", "IndexOutOfRange",
    "Correctness", "Guess", "is_solved", "parse_pattern",
    "score", "score_pattern",
    "ConstraintSet", "retain_consistent", "is_consistent",
    "is_valid_word",
]
