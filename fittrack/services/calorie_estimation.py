"""Calorie estimation for workouts.

Current approach: a linear rate driven only by perceived exertion,
``calories_per_minute = 5 + 1 * RPE``, so an RPE 1 session burns about
6 cal/min and an RPE 10 session about 15 cal/min.

Inputs are trusted: callers clamp minutes to >= 0 and RPE to the 1-10 slider
range (drafts and the API schemas do this) before asking for an estimate.
"""

from __future__ import annotations

import math

from fittrack.core.constants import BASE_CALORIES_PER_MINUTE, RPE_CALORIE_MULTIPLIER


def calories_per_minute(rpe: float) -> float:
    return BASE_CALORIES_PER_MINUTE + RPE_CALORIE_MULTIPLIER * rpe


def estimate_calories(total_minutes: int, rpe: float) -> int:
    """Whole calories for a session of ``total_minutes`` at ``rpe`` (rounded down)."""
    return math.floor(total_minutes * calories_per_minute(rpe))
