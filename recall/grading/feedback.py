"""
Feedback generation.

Maps a final score to a FeedbackCategory and picks one of several
equivalent message templates. The template choice is the only
non-deterministic output of the grader; pass a seeded random.Random (or
any object with a `choice` method) to pin it.
"""

from __future__ import annotations

import random
from typing import Protocol, Sequence

from ..models import Feedback, FeedbackCategory

MAX_LISTED_KEYWORDS = 3

MESSAGES: dict[FeedbackCategory, tuple[str, ...]] = {
    FeedbackCategory.PERFECT: (
        "Perfect! You nailed it!",
        "Absolutely correct! Full marks!",
        "Excellent! You've mastered this one!",
    ),
    FeedbackCategory.EXCELLENT: (
        "Excellent! {score}% - Almost perfect!",
        "Great job! {score}% - You really know this!",
        "Impressive! {score}% - Keep it up!",
    ),
    FeedbackCategory.GOOD: (
        "Good effort! {score}%",
        "Nice! {score}% - You're getting there!",
        "{score}% - Good, minor details missed.",
    ),
    FeedbackCategory.NEEDS_WORK: (
        "{score}% - Let's review this one.",
        "{score}% - Good start, needs more detail.",
        "{score}% - Would you like to try again?",
    ),
    FeedbackCategory.INCORRECT: (
        "{score}% - Don't give up!",
        "{score}% - Let's look at the correct answer.",
        "{score}% - Every attempt helps you learn!",
    ),
}


class Chooser(Protocol):
    """Anything that can pick an element from a sequence."""

    def choice(self, seq: Sequence[str]) -> str:
        ...


def categorize(score: int) -> FeedbackCategory:
    """Select the feedback category for a 0-100 score."""
    if score >= 100:
        return FeedbackCategory.PERFECT
    if score >= 90:
        return FeedbackCategory.EXCELLENT
    if score >= 70:
        return FeedbackCategory.GOOD
    if score >= 50:
        return FeedbackCategory.NEEDS_WORK
    return FeedbackCategory.INCORRECT


def describe_missing(score: int, missing_keywords: Sequence[str]) -> str:
    """List the missing key terms, at most three by name."""
    if not missing_keywords or score >= 100:
        return ""
    if len(missing_keywords) <= MAX_LISTED_KEYWORDS:
        return f"Key terms to include: {', '.join(missing_keywords)}"
    listed = ", ".join(missing_keywords[:MAX_LISTED_KEYWORDS])
    return f"Missing {len(missing_keywords)} key terms including: {listed}"


class FeedbackComposer:
    """
    Builds Feedback for a graded answer.

    Example:
        composer = FeedbackComposer(rng=random.Random(7))
        composer.compose(84, ["powerhouse"])
    """

    def __init__(self, rng: Chooser | None = None):
        """
        Initialize composer.

        Args:
            rng: Source of template choices (module-level random if None)
        """
        self.rng = rng if rng is not None else random

    def compose(self, score: int, missing_keywords: Sequence[str] = ()) -> Feedback:
        """Build feedback for a final score and the keywords it missed."""
        category = categorize(score)
        template = self.rng.choice(MESSAGES[category])
        return Feedback(
            message=template.format(score=score),
            details=describe_missing(score, missing_keywords),
            category=category,
        )
