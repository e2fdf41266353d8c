"""
Core data types for answer evaluation and scheduling.

QuizItem is owned by the caller's item store; the engine only reads its
answer/keyword fields and produces new instances with updated scheduling
state. EvaluationResult is created once per submitted answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Sequence

from loguru import logger

from .errors import InvalidItemError

# =============================================================================
# Enums
# =============================================================================


class Difficulty(str, Enum):
    """Author-assigned difficulty. Informational only."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class FeedbackCategory(str, Enum):
    """Feedback bucket selected from the final score."""
    PERFECT = "perfect"
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needsWork"
    INCORRECT = "incorrect"


# =============================================================================
# Quiz Item
# =============================================================================


@dataclass(frozen=True)
class QuizItem:
    """
    A question/answer item with its spaced-repetition state.

    The first accepted answer is the primary answer shown in feedback.
    When keyword_weights is omitted every keyword weighs 1.0.
    """

    prompt: str
    accepted_answers: Sequence[str]
    keywords: Sequence[str] = ()
    keyword_weights: Sequence[float] | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    id: str | None = None
    hints: Sequence[str] = ()
    explanation: str = ""

    # Scheduling state
    ease_factor: float = 2.5
    interval: int = 0
    repetitions: int = 0
    next_review_at: datetime | None = None  # None = due immediately

    # Review bookkeeping
    last_reviewed_at: datetime | None = None
    review_count: int = 0
    correct_count: int = 0
    mastery_level: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "accepted_answers", tuple(self.accepted_answers))
        object.__setattr__(self, "keywords", tuple(self.keywords))
        object.__setattr__(self, "hints", tuple(self.hints))
        object.__setattr__(self, "difficulty", Difficulty(self.difficulty))

        if not self.keyword_weights:
            weights = tuple(1.0 for _ in self.keywords)
        else:
            weights = tuple(float(w) for w in self.keyword_weights)
        object.__setattr__(self, "keyword_weights", weights)

        validate_item_fields(self.accepted_answers, self.keywords, self.keyword_weights)

    @property
    def primary_answer(self) -> str:
        """The canonical answer shown to the learner."""
        return self.accepted_answers[0]


def validate_item_fields(
    accepted_answers: Sequence[str],
    keywords: Sequence[str],
    keyword_weights: Sequence[float],
) -> None:
    """
    Check the answer/keyword contract of an item.

    Raises:
        InvalidItemError: No accepted answers, or invalid keyword weights
    """
    if len(accepted_answers) == 0:
        logger.warning("Rejected item without accepted answers")
        raise InvalidItemError("Item must have at least one accepted answer")
    validate_keyword_weights(keywords, keyword_weights)


def validate_keyword_weights(keywords: Sequence[str], keyword_weights: Sequence[float]) -> None:
    """
    Check that weights pair one-to-one with keywords and none is negative.

    A zero weight is allowed; an all-zero list scores 0 on the keyword axis.

    Raises:
        InvalidItemError: Length mismatch or a negative weight
    """
    if len(keywords) != len(keyword_weights):
        logger.warning(f"Keyword/weight mismatch: {len(keywords)} vs {len(keyword_weights)}")
        raise InvalidItemError(
            f"Keyword/weight length mismatch: {len(keywords)} keywords, "
            f"{len(keyword_weights)} weights"
        )
    for keyword, weight in zip(keywords, keyword_weights):
        if weight < 0:
            logger.warning(f"Negative weight {weight} for keyword {keyword!r}")
            raise InvalidItemError(f"Keyword {keyword!r} has negative weight {weight}")


# =============================================================================
# Evaluation Result
# =============================================================================


@dataclass(frozen=True)
class KeywordDetail:
    """Coverage of a single keyword in an answer."""
    keyword: str
    found: bool
    weight: float


@dataclass(frozen=True)
class Feedback:
    """Categorical feedback for an evaluated answer."""
    message: str
    details: str
    category: FeedbackCategory


@dataclass(frozen=True)
class EvaluationResult:
    """
    Outcome of grading one answer.

    `skipped` is only set by the caller for items the learner skipped;
    the scorer itself always produces `skipped=False`.
    """

    score: int
    keyword_score: int
    keyword_details: tuple[KeywordDetail, ...]
    feedback: Feedback
    user_answer: str
    expected_answer: str
    skipped: bool = False

    @property
    def missing_keywords(self) -> list[str]:
        """Keywords not detected in the answer, in input order."""
        return [d.keyword for d in self.keyword_details if not d.found]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "score": self.score,
            "keyword_score": self.keyword_score,
            "keyword_details": [
                {"keyword": d.keyword, "found": d.found, "weight": d.weight}
                for d in self.keyword_details
            ],
            "feedback": {
                "message": self.feedback.message,
                "details": self.feedback.details,
                "category": self.feedback.category.value,
            },
            "user_answer": self.user_answer,
            "expected_answer": self.expected_answer,
            "skipped": self.skipped,
        }


# =============================================================================
# Schedule Result
# =============================================================================


@dataclass(frozen=True)
class ScheduleResult:
    """Scheduling fields to persist back onto an item after a review."""
    ease_factor: float
    interval: int
    repetitions: int
    next_review_at: datetime
    quality: int  # SM-2 grade 0-5 derived from the score

    @property
    def passed(self) -> bool:
        """Whether the review counted as a successful recall."""
        return self.repetitions > 0
