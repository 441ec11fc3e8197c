from .patterns import (
    WORD_LENGTH, Slot, PatternConstraint, normalize_pattern, is_valid_pattern, parse_constraint,
)
from .rejects import process_rejects, merge_rejects
from .query import WordFilter, build_filter
from .scoring import LETTER_FREQUENCIES, Candidate, score_word, rank_candidates

__all__ = [
    "WORD_LENGTH", "Slot", "PatternConstraint", "normalize_pattern", "is_valid_pattern",
    "parse_constraint", "process_rejects", "merge_rejects", "WordFilter", "build_filter",
    "LETTER_FREQUENCIES", "Candidate", "score_word", "rank_candidates",
]
