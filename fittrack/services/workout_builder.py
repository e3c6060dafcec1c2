"""Workout aggregate: turning drafts into persisted workouts and editing them.

Saving is lenient: blank names get defaults and zero durations or empty
exercise lists are stored as-is. Editing never diffs the exercise tree; the
old exercises (and their sets) are dropped and rebuilt from the draft.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import datetime

from fittrack.core.constants import (
    DEFAULT_CARDIO_WORKOUT_NAME,
    DEFAULT_EXERCISE_NAME,
    DEFAULT_INTERVAL_NAME,
    DEFAULT_STRENGTH_WORKOUT_NAME,
    RPE_MAX,
    RPE_MIN,
)
from fittrack.core.enums import ActivityKind
from fittrack.models.workout import Workout, WorkoutExercise, WorkoutSet
from fittrack.schemas.workout import (
    CardioIntervalDraft,
    ExerciseDraft,
    SetDraft,
    StrengthSetDraft,
    WorkoutDraft,
)
from fittrack.services.calorie_estimation import estimate_calories


def default_workout_name(kind: ActivityKind) -> str:
    if kind is ActivityKind.CARDIO:
        return DEFAULT_CARDIO_WORKOUT_NAME
    return DEFAULT_STRENGTH_WORKOUT_NAME


def default_exercise_name(kind: ActivityKind) -> str:
    if kind is ActivityKind.CARDIO:
        return DEFAULT_INTERVAL_NAME
    return DEFAULT_EXERCISE_NAME


def total_duration_minutes(workout: Workout) -> int:
    return workout.duration_hours * 60 + workout.duration_minutes


def recompute_calories(workout: Workout) -> int:
    """Refresh the stored estimate from the current duration and RPE."""
    workout.estimated_calories = estimate_calories(total_duration_minutes(workout), workout.overall_rpe)
    return workout.estimated_calories


def replace_exercises(workout: Workout, new_exercises: Iterable[WorkoutExercise]) -> None:
    """Swap the whole exercise list; each exercise's ``order`` becomes its index.

    Exercises no longer in the list are orphans and get deleted (with their
    sets) when the session flushes.
    """
    exercises = list(new_exercises)
    for position, exercise in enumerate(exercises):
        exercise.order = position
        for set_position, set_ in enumerate(exercise.sets):
            set_.set_order = set_position
    workout.exercises = exercises


def build_set(draft: SetDraft, position: int = 0) -> WorkoutSet:
    """Store either set shape in the shared weight/reps/rpe columns."""
    if isinstance(draft, CardioIntervalDraft):
        return WorkoutSet(
            id=uuid.uuid4(),
            set_order=position,
            weight=draft.distance,
            reps=str(draft.duration_minutes),
            rpe=draft.pace,
        )
    return WorkoutSet(
        id=uuid.uuid4(),
        set_order=position,
        weight=draft.weight,
        reps=draft.reps,
        rpe=draft.rpe,
    )


def build_exercises(drafts: Iterable[ExerciseDraft], kind: ActivityKind) -> list[WorkoutExercise]:
    exercises = []
    for position, draft in enumerate(drafts):
        exercises.append(
            WorkoutExercise(
                id=uuid.uuid4(),
                name=draft.name or default_exercise_name(kind),
                notes=draft.notes,
                order=position,
                sets=[build_set(s, i) for i, s in enumerate(draft.sets)],
            )
        )
    return exercises


def create_workout(
    name: str,
    workout_date: datetime,
    duration_hours: int,
    duration_minutes: int,
    rpe: float,
    activity_kind: ActivityKind,
    exercises: Iterable[WorkoutExercise] = (),
    user_id: uuid.UUID | None = None,
) -> Workout:
    """New workout with a fresh id, defaulted name and computed calories."""
    workout = Workout(
        id=uuid.uuid4(),
        user_id=user_id,
        workout_name=name or default_workout_name(activity_kind),
        workout_date=workout_date,
        duration_hours=duration_hours,
        duration_minutes=duration_minutes,
        overall_rpe=rpe,
        activity_type=activity_kind,
    )
    recompute_calories(workout)
    replace_exercises(workout, exercises)
    return workout


def workout_from_draft(draft: WorkoutDraft, user_id: uuid.UUID | None = None) -> Workout:
    return create_workout(
        name=draft.name,
        workout_date=draft.workout_date,
        duration_hours=draft.duration_hours,
        duration_minutes=draft.duration_minutes,
        rpe=draft.overall_rpe,
        activity_kind=draft.activity_kind,
        exercises=build_exercises(draft.exercises, draft.activity_kind),
        user_id=user_id,
    )


def apply_draft(workout: Workout, draft: WorkoutDraft) -> Workout:
    """Save an edit: overwrite the scalars, recompute calories, rebuild exercises."""
    workout.workout_name = draft.name or default_workout_name(draft.activity_kind)
    workout.workout_date = draft.workout_date
    workout.duration_hours = draft.duration_hours
    workout.duration_minutes = draft.duration_minutes
    workout.overall_rpe = draft.overall_rpe
    workout.activity_type = draft.activity_kind
    recompute_calories(workout)
    replace_exercises(workout, build_exercises(draft.exercises, draft.activity_kind))
    return workout


def draft_from_workout(workout: Workout) -> WorkoutDraft:
    """Load a stored workout back into an editable draft (exercises in order)."""
    kind = workout.activity_type or ActivityKind.UNSPECIFIED
    exercises = []
    for exercise in sorted(workout.exercises, key=lambda e: e.order):
        if kind is ActivityKind.CARDIO:
            sets = [
                CardioIntervalDraft(
                    distance=s.weight,
                    duration_minutes=_whole_minutes(s.reps),
                    pace=s.rpe,
                )
                for s in exercise.sets
            ]
        else:
            sets = [
                StrengthSetDraft(weight=s.weight, reps=s.reps, rpe=_clamped_rpe(s.rpe))
                for s in exercise.sets
            ]
        exercises.append(ExerciseDraft(name=exercise.name, notes=exercise.notes, sets=sets))
    return WorkoutDraft(
        name=workout.workout_name,
        workout_date=workout.workout_date,
        duration_hours=workout.duration_hours,
        duration_minutes=workout.duration_minutes,
        overall_rpe=workout.overall_rpe,
        activity_kind=ActivityKind.STRENGTH if kind is ActivityKind.UNSPECIFIED else kind,
        exercises=exercises,
    )


def _whole_minutes(raw: str) -> int:
    try:
        return max(0, int(float(raw)))
    except (TypeError, ValueError, OverflowError):
        return 0


def _clamped_rpe(rpe: float | None) -> float | None:
    # the API stores any set rating; strength drafts only hold 1-10
    if rpe is None:
        return None
    return min(max(rpe, RPE_MIN), RPE_MAX)
