from .scoring import LetterFeedback, Feedback, evaluate, is_solved, pattern_string, parse_pattern
from .constraints import (
    Observation,
    ConstraintSet,
    build_constraints,
    filter_candidates,
    candidates,
    candidates_from_feedback,
)
from .index import WordIndex
from .validation import WORD_LENGTH, normalize_word, require_length, validate_guess

__all__ = [
    "LetterFeedback", "Feedback", "evaluate", "is_solved", "pattern_string", "parse_pattern",
    "Observation", "ConstraintSet", "build_constraints", "filter_candidates",
    "candidates", "candidates_from_feedback", "WordIndex",
    "WORD_LENGTH", "normalize_word", "require_length", "validate_guess",
]
