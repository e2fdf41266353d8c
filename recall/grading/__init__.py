"""
Answer grading.

Normalization and similarity primitives, weighted keyword coverage,
feedback generation and the multi-strategy scorer built on them.
"""

from .feedback import FeedbackComposer, categorize
from .keywords import KeywordAnalysis, analyze_keywords, find_keyword
from .scorer import AnswerScorer, ScoringConfig, evaluate
from .text import (
    edit_distance,
    edit_similarity,
    extract_phrases,
    fuzzy_match,
    normalize,
    word_overlap_similarity,
)

__all__ = [
    # Scorer
    "AnswerScorer",
    "ScoringConfig",
    "evaluate",
    # Keywords
    "KeywordAnalysis",
    "analyze_keywords",
    "find_keyword",
    # Feedback
    "FeedbackComposer",
    "categorize",
    # Text primitives
    "normalize",
    "edit_distance",
    "edit_similarity",
    "extract_phrases",
    "fuzzy_match",
    "word_overlap_similarity",
]
