"""
Half-up rounding.

Python's round() rounds halves to even (round(2.5) == 2). Scores, SM-2
quality and intervals were calibrated with halves rounding up, so every
integer conversion in the engine goes through round_half_up().
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))
