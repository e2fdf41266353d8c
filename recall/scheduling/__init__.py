"""
Spaced-repetition scheduling.
"""

from .queue import due_items, is_due
from .sm2 import SM2Config, SM2Scheduler, apply_review, quality_from_score, schedule

__all__ = [
    "SM2Config",
    "SM2Scheduler",
    "apply_review",
    "quality_from_score",
    "schedule",
    "due_items",
    "is_due",
]
