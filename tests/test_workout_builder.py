"""Tests for creating, editing and re-loading workouts."""
import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from fittrack.core.enums import ActivityKind
from fittrack.models.workout import WorkoutExercise, WorkoutSet
from fittrack.schemas.workout import (
    CardioIntervalDraft,
    ExerciseDraft,
    StrengthSetDraft,
    WorkoutDraft,
)
from fittrack.services.workout_builder import (
    apply_draft,
    build_exercises,
    create_workout,
    draft_from_workout,
    replace_exercises,
    total_duration_minutes,
    workout_from_draft,
)

DATE = datetime(2025, 11, 9, 17, 30, tzinfo=timezone.utc)


def make_exercise(name: str, n_sets: int = 1) -> WorkoutExercise:
    return WorkoutExercise(
        id=uuid.uuid4(),
        name=name,
        notes="",
        order=99,
        sets=[WorkoutSet(id=uuid.uuid4(), weight="100", reps="5", rpe=None) for _ in range(n_sets)],
    )


class TestCreateWorkout:
    def test_push_day(self):
        workout = create_workout("Push Day", DATE, 1, 30, 7, ActivityKind.STRENGTH)

        assert total_duration_minutes(workout) == 90
        assert workout.estimated_calories == 1080
        assert workout.workout_name == "Push Day"
        assert isinstance(workout.id, uuid.UUID)

    def test_fresh_ids(self):
        a = create_workout("A", DATE, 0, 10, 5, ActivityKind.STRENGTH)
        b = create_workout("A", DATE, 0, 10, 5, ActivityKind.STRENGTH)
        assert a.id != b.id

    def test_empty_name_cardio(self):
        workout = create_workout("", DATE, 0, 30, 5, ActivityKind.CARDIO)
        assert workout.workout_name == "Untitled Cardio"

    @pytest.mark.parametrize("kind", [ActivityKind.STRENGTH, ActivityKind.UNSPECIFIED])
    def test_empty_name_strength(self, kind):
        workout = create_workout("", DATE, 0, 30, 5, kind)
        assert workout.workout_name == "Untitled Workout"

    def test_lenient_empty_workout(self):
        workout = create_workout("", DATE, 0, 0, 1, ActivityKind.STRENGTH)
        assert workout.exercises == []
        assert workout.estimated_calories == 0

    def test_exercises_get_positions(self):
        exercises = [make_exercise("Squat"), make_exercise("Lunge")]
        workout = create_workout("Legs", DATE, 1, 0, 6, ActivityKind.STRENGTH, exercises)
        assert [e.order for e in workout.exercises] == [0, 1]


class TestReplaceExercises:
    def test_full_replace(self):
        old = [make_exercise("Old A"), make_exercise("Old B")]
        workout = create_workout("W", DATE, 0, 45, 5, ActivityKind.STRENGTH, old)
        new = [make_exercise("New A", 2), make_exercise("New B"), make_exercise("New C")]

        replace_exercises(workout, new)

        assert workout.exercises == new
        assert [e.order for e in workout.exercises] == [0, 1, 2]
        assert all(e not in workout.exercises for e in old)

    def test_set_positions_follow_list(self):
        exercise = make_exercise("Row", 3)
        workout = create_workout("W", DATE, 0, 45, 5, ActivityKind.STRENGTH)
        replace_exercises(workout, [exercise])
        assert [s.set_order for s in workout.exercises[0].sets] == [0, 1, 2]

    def test_replace_with_nothing(self):
        workout = create_workout("W", DATE, 0, 45, 5, ActivityKind.STRENGTH, [make_exercise("A")])
        replace_exercises(workout, [])
        assert workout.exercises == []


class TestDrafts:
    def test_strength_draft_defaults_exercise_names(self):
        draft = WorkoutDraft(
            name="",
            workout_date=DATE,
            duration_hours=1,
            duration_minutes=30,
            overall_rpe=7,
            exercises=[ExerciseDraft(sets=[StrengthSetDraft(weight="135", reps="10", rpe=8)])],
        )
        workout = workout_from_draft(draft)

        assert workout.workout_name == "Untitled Workout"
        assert workout.estimated_calories == 1080
        assert workout.exercises[0].name == "Unnamed Exercise"
        s = workout.exercises[0].sets[0]
        assert (s.weight, s.reps, s.rpe) == ("135", "10", 8)

    def test_cardio_interval_is_stored_in_set_columns(self):
        exercises = build_exercises(
            [ExerciseDraft(sets=[CardioIntervalDraft(distance="2.5", duration_minutes=20, pace=8.5)])],
            ActivityKind.CARDIO,
        )
        assert exercises[0].name == "Unnamed Activity"
        s = exercises[0].sets[0]
        assert (s.weight, s.reps, s.rpe) == ("2.5", "20", 8.5)

    @pytest.mark.parametrize("rpe", [0, 10.5, -1])
    def test_set_rating_out_of_range(self, rpe):
        with pytest.raises(ValidationError):
            StrengthSetDraft(weight="100", reps="5", rpe=rpe)

    def test_set_kind_discriminator(self):
        draft = ExerciseDraft.model_validate(
            {"sets": [{"kind": "cardio", "distance": "1", "duration_minutes": 5}, {"weight": "50"}]}
        )
        assert isinstance(draft.sets[0], CardioIntervalDraft)
        assert isinstance(draft.sets[1], StrengthSetDraft)

    def test_apply_draft_rebuilds_tree(self):
        workout = workout_from_draft(
            WorkoutDraft(
                name="Leg Day",
                workout_date=DATE,
                duration_minutes=30,
                overall_rpe=5,
                exercises=[ExerciseDraft(name="Squat"), ExerciseDraft(name="Lunge")],
            )
        )
        original_id = workout.id
        old_exercise_ids = {e.id for e in workout.exercises}

        edit = draft_from_workout(workout)
        edit.duration_hours = 1
        edit.exercises = [ExerciseDraft(name="Deadlift")]
        apply_draft(workout, edit)

        assert workout.id == original_id
        assert [e.name for e in workout.exercises] == ["Deadlift"]
        assert workout.exercises[0].id not in old_exercise_ids
        assert workout.estimated_calories == 90 * 10

    def test_round_trip_cardio_draft(self):
        draft = WorkoutDraft(
            name="Run",
            workout_date=DATE,
            duration_minutes=25,
            overall_rpe=6,
            activity_kind=ActivityKind.CARDIO,
            exercises=[
                ExerciseDraft(
                    name="Intervals",
                    notes="hilly",
                    sets=[CardioIntervalDraft(distance="1.2", duration_minutes=9, pace=7.5)],
                )
            ],
        )
        assert draft_from_workout(workout_from_draft(draft)) == draft

    def test_legacy_workout_loads_as_strength(self):
        workout = create_workout("Old", DATE, 0, 20, 4, ActivityKind.UNSPECIFIED)
        assert draft_from_workout(workout).activity_kind is ActivityKind.STRENGTH

    def test_out_of_range_set_rating_is_clamped_on_load(self):
        exercise = WorkoutExercise(
            name="Squat",
            sets=[WorkoutSet(weight="225", reps="5", rpe=12), WorkoutSet(weight="135", reps="10", rpe=0.5)],
        )
        workout = create_workout("Legs", DATE, 1, 0, 8, ActivityKind.STRENGTH, [exercise])

        draft = draft_from_workout(workout)

        assert [s.rpe for s in draft.exercises[0].sets] == [10, 1]

    def test_fractional_interval_minutes_are_truncated(self):
        interval = WorkoutExercise(name="Tempo", sets=[WorkoutSet(weight="3.1", reps="25.5", rpe=8.1)])
        workout = create_workout("Run", DATE, 0, 30, 6, ActivityKind.CARDIO, [interval])

        (loaded,) = draft_from_workout(workout).exercises[0].sets

        assert loaded.duration_minutes == 25
        assert loaded.distance == "3.1"
