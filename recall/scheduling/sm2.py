"""
SM-2 Spaced Repetition Scheduler.

Maps an evaluation score (0-100) to an SM-2 quality grade and computes the
item's next ease factor, interval and review time.

SM-2 Quality Scale (derived as round(score / 100 * 5)):
0-2 - Failed recall: repetitions reset, review again tomorrow
3   - Correct, with significant difficulty
4   - Correct, with some hesitation
5   - Correct, perfect recall

The scheduler is a pure state transition: it returns a new ScheduleResult
(or a new QuizItem via apply_review) and never mutates its inputs.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from loguru import logger

from ..config import Settings, get_settings
from ..models import QuizItem, ScheduleResult
from ..rounding import clamp, round_half_up

# =============================================================================
# SM-2 Algorithm
# =============================================================================


@dataclass(frozen=True)
class SM2Config:
    """Configuration for SM-2 algorithm."""

    minimum_easiness: float = 1.3
    first_interval: int = 1  # Days for first review
    second_interval: int = 6  # Days for second review
    passing_quality: int = 3
    correct_score_threshold: int = 70  # Counts toward correct_count

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SM2Config:
        """Build config from application settings."""
        settings = settings or get_settings()
        return cls(
            minimum_easiness=settings.sm2_minimum_ease,
            first_interval=settings.sm2_first_interval,
            second_interval=settings.sm2_second_interval,
            passing_quality=settings.sm2_passing_quality,
            correct_score_threshold=settings.correct_score_threshold,
        )


def quality_from_score(score: float) -> int:
    """Convert a 0-100 score to an SM-2 quality grade (0-5)."""
    return int(clamp(round_half_up(score / 100 * 5), 0, 5))


class SM2Scheduler:
    """
    Implements the SM-2 spaced repetition algorithm.

    Each item carries:
    - Ease Factor (EF): growth multiplier for intervals (2.5 default, min 1.3)
    - Interval: Days until next review
    - Repetitions: Consecutive passing reviews
    """

    def __init__(self, config: SM2Config | None = None):
        """
        Initialize SM-2 scheduler.

        Args:
            config: Custom configuration (from settings if None)
        """
        self.config = config or SM2Config.from_settings()

    def schedule(
        self,
        score: float,
        ease_factor: float,
        interval: int,
        repetitions: int,
        now: datetime | None = None,
    ) -> ScheduleResult:
        """
        Calculate the next review based on an evaluation score.

        Args:
            score: Evaluation score (0-100)
            ease_factor: Current ease factor
            interval: Current interval in days
            repetitions: Current consecutive passes
            now: Moment of the review (current UTC time if None)

        Returns:
            ScheduleResult with the updated scheduling fields

        Raises:
            ValueError: Score outside 0-100 or negative interval/repetitions
        """
        if not 0 <= score <= 100:
            raise ValueError(f"Score must be within 0-100, got {score}")
        if interval < 0 or repetitions < 0:
            raise ValueError(
                f"Interval and repetitions must be non-negative, got {interval}/{repetitions}"
            )

        now = now or datetime.now(timezone.utc)
        ease_factor = max(self.config.minimum_easiness, ease_factor)
        quality = quality_from_score(score)

        if quality >= self.config.passing_quality:
            if repetitions == 0:
                new_interval = self.config.first_interval
            elif repetitions == 1:
                new_interval = self.config.second_interval
            else:
                new_interval = round_half_up(interval * ease_factor)
            new_repetitions = repetitions + 1
        else:
            # Failed - reset to beginning
            new_repetitions = 0
            new_interval = self.config.first_interval

        # EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
        ef_delta = 0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02)
        new_ef = max(self.config.minimum_easiness, ease_factor + ef_delta)

        logger.debug(
            f"SM-2: score={score} q={quality} EF {ease_factor:.2f}->{new_ef:.2f} "
            f"interval {interval}->{new_interval} reps {repetitions}->{new_repetitions}"
        )

        return ScheduleResult(
            ease_factor=new_ef,
            interval=new_interval,
            repetitions=new_repetitions,
            next_review_at=now + timedelta(days=new_interval),
            quality=quality,
        )

    def apply_review(
        self,
        item: QuizItem,
        score: float,
        now: datetime | None = None,
    ) -> QuizItem:
        """
        Produce the post-review version of an item.

        Args:
            item: Item as it was before the review
            score: Evaluation score (0-100)
            now: Moment of the review (current UTC time if None)

        Returns:
            New QuizItem with scheduling and bookkeeping fields updated
        """
        now = now or datetime.now(timezone.utc)
        result = self.schedule(score, item.ease_factor, item.interval, item.repetitions, now=now)
        is_correct = score >= self.config.correct_score_threshold

        return dataclasses.replace(
            item,
            ease_factor=result.ease_factor,
            interval=result.interval,
            repetitions=result.repetitions,
            next_review_at=result.next_review_at,
            last_reviewed_at=now,
            review_count=item.review_count + 1,
            correct_count=item.correct_count + (1 if is_correct else 0),
            mastery_level=min(100, round_half_up(score)),
        )


def schedule(
    score: float,
    ease_factor: float,
    interval: int,
    repetitions: int,
    now: datetime | None = None,
) -> ScheduleResult:
    """Run one SM-2 step with the configured scheduler."""
    return SM2Scheduler().schedule(score, ease_factor, interval, repetitions, now=now)


def apply_review(item: QuizItem, score: float, now: datetime | None = None) -> QuizItem:
    """Return `item` updated for a review that scored `score`."""
    return SM2Scheduler().apply_review(item, score, now=now)
