from .errors import BrainError, NoCandidates, MalformedDictionaryEntry, MalformedFeedbackInput
from .words import Word
from .feedback import (
    Mark, FeedbackMark, Correct, Misplaced, Absent, Feedback, FeedbackPattern,
    score, score_pattern, pattern, is_solved, pattern_string, from_pattern, parse_feedback,
)
from .constraints import Constraints, build_constraints, filter_candidates
from .validation import validate_guess

__all__ = [
    "BrainError", "NoCandidates", "MalformedDictionaryEntry", "MalformedFeedbackInput",
    "Word",
    "Mark", "FeedbackMark", "Correct", "Misplaced", "Absent", "Feedback", "FeedbackPattern",
    "score", "score_pattern", "pattern", "is_solved", "pattern_string", "from_pattern",
    "parse_feedback",
    "Constraints", "build_constraints", "filter_candidates",
    "validate_guess",
]
