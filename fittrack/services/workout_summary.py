"""Read-only summaries of a saved workout (what the detail card shows)."""

from __future__ import annotations

from dataclasses import dataclass, field

from fittrack.core.enums import ActivityKind
from fittrack.models.workout import Workout, WorkoutExercise
from fittrack.services.workout_builder import total_duration_minutes


def format_duration(hours: int, minutes: int) -> str:
    """``1h 30m``, ``1h`` or ``45m``."""
    if hours > 0 and minutes > 0:
        return f"{hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"


def format_calories(calories: int) -> str:
    return f"-{calories} cal"


@dataclass
class WorkoutSummary:
    title: str
    section_label: str
    duration_label: str
    calories_label: str
    total_minutes: int
    exercise_count: int
    set_count: int
    exercises: list[WorkoutExercise] = field(default_factory=list)


def summarize(workout: Workout) -> WorkoutSummary:
    is_cardio = workout.activity_type is ActivityKind.CARDIO
    exercises = sorted(workout.exercises, key=lambda e: e.order)
    return WorkoutSummary(
        title="Cardio Summary" if is_cardio else "Workout Summary",
        section_label="Intervals" if is_cardio else "Exercises",
        duration_label=format_duration(workout.duration_hours, workout.duration_minutes),
        calories_label=format_calories(workout.estimated_calories),
        total_minutes=total_duration_minutes(workout),
        exercise_count=len(exercises),
        set_count=sum(len(e.sets) for e in exercises),
        exercises=exercises,
    )
