"""Map workouts to and from the sync envelope.

Pure serialization: nothing here merges a pulled workout with local edits.
A push replaces the server copy and a pull is taken as-is.
"""

from __future__ import annotations

import uuid

from fittrack.core.dates import as_utc
from fittrack.core.enums import ActivityKind
from fittrack.models.workout import Workout, WorkoutExercise, WorkoutSet
from fittrack.schemas.workout import (
    ExerciseResponse,
    ExerciseSync,
    SetResponse,
    SetSync,
    WorkoutResponse,
    WorkoutSyncRequest,
)


def wire_activity_type(kind: ActivityKind | None) -> str:
    """Unspecified (legacy) workouts go out as strength."""
    if kind is ActivityKind.CARDIO:
        return ActivityKind.CARDIO.value
    return ActivityKind.STRENGTH.value


def activity_kind_from_wire(value: str | None) -> ActivityKind:
    try:
        return ActivityKind((value or "").lower())
    except ValueError:
        return ActivityKind.UNSPECIFIED


def _ordered_exercises(workout: Workout) -> list[WorkoutExercise]:
    return sorted(workout.exercises, key=lambda e: e.order)


def to_sync_request(workout: Workout) -> WorkoutSyncRequest:
    return WorkoutSyncRequest(
        workout_name=workout.workout_name,
        workout_date=workout.workout_date,
        duration_hours=workout.duration_hours,
        duration_minutes=workout.duration_minutes,
        overall_rpe=workout.overall_rpe,
        estimated_calories=workout.estimated_calories,
        activity_type=wire_activity_type(workout.activity_type),
        exercises=[
            ExerciseSync(
                name=exercise.name,
                notes=exercise.notes,
                order=exercise.order,
                sets=[SetSync(weight=s.weight, reps=s.reps, rpe=s.rpe) for s in exercise.sets],
            )
            for exercise in _ordered_exercises(workout)
        ],
    )


def exercises_from_wire(exercises: list[ExerciseSync]) -> list[WorkoutExercise]:
    """Exercises sorted by wire order; ids from a response are kept, others are new."""
    built = []
    for exercise in sorted(exercises, key=lambda e: e.order):
        built.append(
            WorkoutExercise(
                id=getattr(exercise, "id", None) or uuid.uuid4(),
                name=exercise.name,
                notes=exercise.notes,
                order=exercise.order,
                sets=[
                    WorkoutSet(
                        id=getattr(s, "id", None) or uuid.uuid4(),
                        set_order=position,
                        weight=s.weight,
                        reps=s.reps,
                        rpe=s.rpe,
                    )
                    for position, s in enumerate(exercise.sets)
                ],
            )
        )
    return built


def workout_from_sync_request(
    request: WorkoutSyncRequest,
    workout_id: uuid.UUID | None = None,
    user_id: uuid.UUID | None = None,
) -> Workout:
    """Build an unsaved workout from a pushed envelope; ids are freshly allocated."""
    return Workout(
        id=workout_id or uuid.uuid4(),
        user_id=user_id,
        workout_name=request.workout_name,
        workout_date=request.workout_date,
        duration_hours=request.duration_hours,
        duration_minutes=request.duration_minutes,
        overall_rpe=request.overall_rpe,
        estimated_calories=request.estimated_calories,
        activity_type=activity_kind_from_wire(request.activity_type),
        exercises=exercises_from_wire(request.exercises),
    )


def workout_from_response(response: WorkoutResponse) -> Workout:
    """A pulled workout, keeping the server's ids and timestamps."""
    workout = workout_from_sync_request(response, workout_id=response.id, user_id=response.user_id)
    workout.created_at = response.created_at
    workout.updated_at = response.updated_at
    return workout


def to_workout_response(workout: Workout) -> WorkoutResponse:
    return WorkoutResponse(
        id=workout.id,
        user_id=workout.user_id,
        workout_name=workout.workout_name,
        workout_date=as_utc(workout.workout_date),
        duration_hours=workout.duration_hours,
        duration_minutes=workout.duration_minutes,
        overall_rpe=workout.overall_rpe,
        estimated_calories=workout.estimated_calories,
        activity_type=wire_activity_type(workout.activity_type),
        exercises=[
            ExerciseResponse(
                id=exercise.id,
                workout_id=workout.id,
                name=exercise.name,
                notes=exercise.notes,
                order=exercise.order,
                sets=[
                    SetResponse(id=s.id, exercise_id=exercise.id, weight=s.weight, reps=s.reps, rpe=s.rpe)
                    for s in exercise.sets
                ],
            )
            for exercise in _ordered_exercises(workout)
        ],
        created_at=as_utc(workout.created_at),
        updated_at=as_utc(workout.updated_at),
    )
