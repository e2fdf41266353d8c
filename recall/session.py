"""
Session aggregates.

Builds results for skipped items and rolls a session's results up into the
summary shown at the end of a study session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from .models import EvaluationResult, Feedback, FeedbackCategory, QuizItem
from .rounding import round_half_up


@dataclass(frozen=True)
class SessionSummary:
    """A study session summary."""

    deck_id: str
    deck_name: str
    started_at: datetime
    completed_at: datetime
    total_questions: int
    answered_questions: int
    skipped_questions: int
    average_score: int  # Over answered questions only
    perfect_answers: int
    results: tuple[EvaluationResult, ...] = field(default=(), repr=False)

    @property
    def duration_seconds(self) -> float:
        return (self.completed_at - self.started_at).total_seconds()


def skipped_result(item: QuizItem) -> EvaluationResult:
    """Result recorded when the learner skips an item."""
    return EvaluationResult(
        score=0,
        keyword_score=0,
        keyword_details=(),
        feedback=Feedback(message="Skipped", details="", category=FeedbackCategory.INCORRECT),
        user_answer="",
        expected_answer=item.primary_answer,
        skipped=True,
    )


def summarize_session(
    results: Sequence[EvaluationResult],
    started_at: datetime,
    completed_at: datetime,
    deck_id: str = "",
    deck_name: str = "",
) -> SessionSummary:
    """
    Aggregate a session's results.

    Args:
        results: Results in the order they were produced
        started_at: Session start
        completed_at: Session end
        deck_id: Deck studied
        deck_name: Display name of the deck

    Returns:
        SessionSummary with counts and the average answered score
    """
    answered = [r for r in results if not r.skipped]
    total_score = sum(r.score for r in answered)
    average = round_half_up(total_score / len(answered)) if answered else 0

    return SessionSummary(
        deck_id=deck_id,
        deck_name=deck_name,
        started_at=started_at,
        completed_at=completed_at,
        total_questions=len(results),
        answered_questions=len(answered),
        skipped_questions=len(results) - len(answered),
        average_score=average,
        perfect_answers=sum(1 for r in answered if r.score == 100),
        results=tuple(results),
    )
