"""Tests for mapping workouts to and from the sync envelope."""
import json
import uuid
from datetime import datetime, timezone

from fittrack.core.enums import ActivityKind
from fittrack.models.workout import WorkoutExercise, WorkoutSet
from fittrack.schemas.workout import (
    ExerciseDraft,
    StrengthSetDraft,
    WorkoutDraft,
    WorkoutResponse,
    WorkoutSyncRequest,
)
from fittrack.services.sync_transcoding import (
    activity_kind_from_wire,
    to_sync_request,
    to_workout_response,
    wire_activity_type,
    workout_from_response,
    workout_from_sync_request,
)
from fittrack.services.workout_builder import create_workout, workout_from_draft

DATE = datetime(2025, 11, 9, 17, 30, tzinfo=timezone.utc)


def one_exercise_two_sets():
    return workout_from_draft(
        WorkoutDraft(
            name="Push Day",
            workout_date=DATE,
            duration_hours=1,
            duration_minutes=30,
            overall_rpe=7,
            exercises=[
                ExerciseDraft(
                    name="Bench Press",
                    notes="paused reps",
                    sets=[
                        StrengthSetDraft(weight="185", reps="8", rpe=7.5),
                        StrengthSetDraft(weight="195", reps="6"),
                    ],
                )
            ],
        )
    )


def scalar_fields(workout):
    return (
        workout.workout_name,
        workout.workout_date,
        workout.duration_hours,
        workout.duration_minutes,
        workout.overall_rpe,
        workout.estimated_calories,
        workout.activity_type,
    )


def tree(workout):
    return [
        (e.name, e.notes, e.order, [(s.weight, s.reps, s.rpe) for s in e.sets])
        for e in workout.exercises
    ]


def test_wire_field_names():
    body = json.loads(to_sync_request(one_exercise_two_sets()).model_dump_json())

    assert set(body) == {
        "workout_name",
        "workout_date",
        "duration_hours",
        "duration_minutes",
        "overall_rpe",
        "estimated_calories",
        "activity_type",
        "exercises",
    }
    assert body["workout_date"].startswith("2025-11-09T17:30:00")
    assert body["activity_type"] == "strength"
    assert body["exercises"][0]["sets"][1] == {"weight": "195", "reps": "6", "rpe": None}


def test_round_trip_through_json():
    workout = one_exercise_two_sets()
    wire = to_sync_request(workout).model_dump_json()

    back = workout_from_sync_request(WorkoutSyncRequest.model_validate_json(wire))

    assert scalar_fields(back) == scalar_fields(workout)
    assert tree(back) == tree(workout)
    assert back.created_at is None and back.updated_at is None


def test_server_fields_present_after_sync():
    workout = one_exercise_two_sets()
    assert "id" not in to_sync_request(workout).model_dump()

    workout.user_id = uuid.uuid4()
    workout.created_at = workout.updated_at = DATE
    response = WorkoutResponse.model_validate_json(to_workout_response(workout).model_dump_json())
    pulled = workout_from_response(response)

    assert pulled.id == workout.id
    assert pulled.user_id == workout.user_id
    assert pulled.created_at == DATE
    assert pulled.exercises[0].id == workout.exercises[0].id
    assert scalar_fields(pulled) == scalar_fields(workout)
    assert tree(pulled) == tree(workout)


def test_unspecified_kind_goes_out_as_strength():
    legacy = create_workout("Old", DATE, 0, 20, 4, ActivityKind.UNSPECIFIED)
    assert to_sync_request(legacy).activity_type == "strength"
    assert wire_activity_type(None) == "strength"
    assert wire_activity_type(ActivityKind.CARDIO) == "cardio"


def test_activity_kind_from_wire():
    assert activity_kind_from_wire("cardio") is ActivityKind.CARDIO
    assert activity_kind_from_wire("STRENGTH") is ActivityKind.STRENGTH
    assert activity_kind_from_wire("yoga") is ActivityKind.UNSPECIFIED
    assert activity_kind_from_wire(None) is ActivityKind.UNSPECIFIED


def test_naive_dates_come_back_as_utc():
    workout = one_exercise_two_sets()
    workout.user_id = uuid.uuid4()
    workout.workout_date = datetime(2025, 11, 9, 17, 30)
    workout.created_at = workout.updated_at = datetime(2025, 11, 9, 18, 0)

    response = to_workout_response(workout)

    assert response.workout_date == DATE
    assert response.created_at.tzinfo is not None


def test_unsaved_exercise_without_notes_syncs():
    bench = WorkoutExercise(name="Bench", sets=[WorkoutSet(weight="100", reps="5")])
    workout = create_workout("W", DATE, 0, 30, 5, ActivityKind.STRENGTH, [bench])
    workout.user_id = uuid.uuid4()
    workout.created_at = workout.updated_at = DATE

    request = to_sync_request(workout)
    response = to_workout_response(workout)

    assert request.exercises[0].notes == ""
    assert request.exercises[0].sets[0].model_dump() == {"weight": "100", "reps": "5", "rpe": None}
    assert response.exercises[0].id == bench.id
    assert response.exercises[0].sets[0].id is not None


def test_blank_set_fields_default_to_empty_text():
    empty = WorkoutSet()
    assert (empty.weight, empty.reps, empty.rpe) == ("", "", None)
