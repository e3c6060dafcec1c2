"""Workout schemas: editable drafts and the sync envelope.

Drafts are what a logging form holds before the user taps save. The sync
envelope is the snake_case JSON the API accepts (``WorkoutSyncRequest``)
and returns (``WorkoutResponse``).
"""

from datetime import datetime, timezone
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.constants import MAX_DURATION_HOURS, MAX_DURATION_MINUTES, RPE_MAX, RPE_MIN
from fittrack.core.enums import ActivityKind

WireActivityType = Literal["strength", "cardio"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Drafts ---


class StrengthSetDraft(BaseModel):
    """Weight and reps as typed (unit-less text) plus an optional 1-10 rating."""

    kind: Literal["strength"] = "strength"
    weight: str = ""
    reps: str = ""
    rpe: float | None = Field(None, ge=RPE_MIN, le=RPE_MAX)


class CardioIntervalDraft(BaseModel):
    """Distance as typed, whole minutes, and an optional numeric pace."""

    kind: Literal["cardio"] = "cardio"
    distance: str = ""
    duration_minutes: int = Field(0, ge=0)
    pace: float | None = None


SetDraft = Annotated[Union[StrengthSetDraft, CardioIntervalDraft], Field(discriminator="kind")]


class ExerciseDraft(BaseModel):
    name: str = ""
    notes: str = ""
    sets: list[SetDraft] = Field(default_factory=list)


class WorkoutDraft(BaseModel):
    name: str = ""
    workout_date: datetime = Field(default_factory=_utcnow)
    duration_hours: int = Field(0, ge=0, le=MAX_DURATION_HOURS)
    duration_minutes: int = Field(0, ge=0, le=MAX_DURATION_MINUTES)
    overall_rpe: float = Field(5.0, ge=RPE_MIN, le=RPE_MAX)
    activity_kind: ActivityKind = ActivityKind.STRENGTH
    exercises: list[ExerciseDraft] = Field(default_factory=list)


# --- Sync envelope ---


class SetSync(BaseModel):
    weight: str = ""
    reps: str = ""
    rpe: float | None = None


class ExerciseSync(BaseModel):
    name: str = ""
    notes: str = ""
    order: int = Field(0, ge=0)
    sets: list[SetSync] = Field(default_factory=list)


class WorkoutSyncRequest(BaseModel):
    """Body of POST /workouts and PUT /workouts/{id}."""

    workout_name: str = ""
    workout_date: datetime
    duration_hours: int = Field(0, ge=0, le=MAX_DURATION_HOURS)
    duration_minutes: int = Field(0, ge=0, le=MAX_DURATION_MINUTES)
    overall_rpe: float = Field(..., ge=RPE_MIN, le=RPE_MAX)
    estimated_calories: int = Field(0, ge=0)
    activity_type: WireActivityType
    exercises: list[ExerciseSync] = Field(default_factory=list)


class WorkoutSyncResponse(BaseModel):
    id: UUID
    message: str


class SetResponse(SetSync):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: UUID


class ExerciseResponse(ExerciseSync):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID
    sets: list[SetResponse] = Field(default_factory=list)


class WorkoutResponse(WorkoutSyncRequest):
    """A workout as stored server side, with server-assigned id and timestamps."""

    id: UUID
    user_id: UUID
    exercises: list[ExerciseResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
