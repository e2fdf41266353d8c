"""
Due-item selection.

An item is due when it has never been scheduled or its review time has
passed. Never-scheduled items come first, then the most overdue.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from loguru import logger

from ..models import QuizItem


def is_due(item: QuizItem, now: datetime | None = None) -> bool:
    """Check if an item is due for review."""
    if item.next_review_at is None:
        return True  # Never reviewed = due
    now = now or datetime.now(timezone.utc)
    return item.next_review_at <= now


def due_items(
    items: Iterable[QuizItem],
    now: datetime | None = None,
    limit: int | None = None,
) -> list[QuizItem]:
    """
    Select the items due for review, in review order.

    Args:
        items: Candidate items
        now: Reference time (current UTC time if None)
        limit: Maximum number of items to return

    Returns:
        Due items, never-reviewed first, then by ascending next_review_at
    """
    now = now or datetime.now(timezone.utc)
    due = [item for item in items if is_due(item, now)]

    # sort() is stable, so ties keep their input order
    due.sort(key=lambda item: (item.next_review_at is not None, item.next_review_at or now))

    if limit is not None:
        due = due[:limit]

    logger.debug(f"{len(due)} items due at {now.isoformat()}")
    return due
