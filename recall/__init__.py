"""
Recall: answer evaluation and spaced-repetition scheduling.

Two entry points:

    result = evaluate("the mitochondria", item)
    state = schedule(result.score, item.ease_factor, item.interval, item.repetitions)

Both are pure functions over the data passed in.
"""

from .errors import InvalidItemError, RecallError
from .grading import AnswerScorer, ScoringConfig, evaluate
from .models import (
    Difficulty,
    EvaluationResult,
    Feedback,
    FeedbackCategory,
    KeywordDetail,
    QuizItem,
    ScheduleResult,
)
from .scheduling import SM2Config, SM2Scheduler, apply_review, due_items, is_due, schedule
from .session import SessionSummary, skipped_result, summarize_session

__version__ = "1.0.0"

__all__ = [
    "evaluate",
    "schedule",
    "apply_review",
    "due_items",
    "is_due",
    "skipped_result",
    "summarize_session",
    "AnswerScorer",
    "ScoringConfig",
    "SM2Config",
    "SM2Scheduler",
    "Difficulty",
    "EvaluationResult",
    "Feedback",
    "FeedbackCategory",
    "KeywordDetail",
    "QuizItem",
    "ScheduleResult",
    "SessionSummary",
    "InvalidItemError",
    "RecallError",
]
