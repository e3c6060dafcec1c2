"""Workout sync endpoints (scoped to the authenticated user)."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fittrack.api.deps import get_current_user_id
from fittrack.db.session import get_db
from fittrack.models.workout import Workout, WorkoutExercise
from fittrack.schemas.common import MessageResponse
from fittrack.schemas.workout import WorkoutResponse, WorkoutSyncRequest, WorkoutSyncResponse
from fittrack.services.sync_transcoding import (
    activity_kind_from_wire,
    exercises_from_wire,
    to_workout_response,
    workout_from_sync_request,
)
from fittrack.services.workout_builder import (
    default_workout_name,
    recompute_calories,
    replace_exercises,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _select_tree():
    return select(Workout).options(
        selectinload(Workout.exercises).selectinload(WorkoutExercise.sets)
    )


async def _get_owned_workout(db: AsyncSession, workout_id: uuid.UUID, user_id: uuid.UUID) -> Workout:
    result = await db.execute(
        _select_tree().where(Workout.id == workout_id, Workout.user_id == user_id)
    )
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.post("", response_model=WorkoutSyncResponse, status_code=201)
async def create_workout(
    payload: WorkoutSyncRequest,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Store a pushed workout with its exercises and sets. Calories are recomputed."""
    workout = workout_from_sync_request(payload, user_id=user_id)
    workout.workout_name = payload.workout_name or default_workout_name(workout.activity_type)
    replace_exercises(workout, workout.exercises)
    recompute_calories(workout)
    now = datetime.now(timezone.utc)
    workout.created_at = now
    workout.updated_at = now
    db.add(workout)
    await db.flush()
    logger.info("Created workout %s with %d exercises", workout.id, len(workout.exercises))
    return WorkoutSyncResponse(id=workout.id, message="Workout created successfully")


@router.get("", response_model=list[WorkoutResponse])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """All of the caller's workouts with nested exercises and sets."""
    result = await db.execute(
        _select_tree().where(Workout.user_id == user_id).order_by(Workout.workout_date.desc())
    )
    return [to_workout_response(w) for w in result.scalars().all()]


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    workout = await _get_owned_workout(db, workout_id, user_id)
    return to_workout_response(workout)


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def replace_workout(
    workout_id: uuid.UUID,
    payload: WorkoutSyncRequest,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Full replace: scalars are overwritten and the exercise tree is rebuilt."""
    workout = await _get_owned_workout(db, workout_id, user_id)
    kind = activity_kind_from_wire(payload.activity_type)
    workout.workout_name = payload.workout_name or default_workout_name(kind)
    workout.workout_date = payload.workout_date
    workout.duration_hours = payload.duration_hours
    workout.duration_minutes = payload.duration_minutes
    workout.overall_rpe = payload.overall_rpe
    workout.activity_type = kind
    recompute_calories(workout)
    replace_exercises(workout, exercises_from_wire(payload.exercises))
    workout.updated_at = datetime.now(timezone.utc)
    await db.flush()
    logger.info("Replaced workout %s", workout.id)
    return to_workout_response(workout)


@router.delete("/{workout_id}", response_model=MessageResponse)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Delete a workout and, by cascade, its exercises and sets."""
    workout = await _get_owned_workout(db, workout_id, user_id)
    await db.delete(workout)
    await db.flush()
    logger.info("Deleted workout %s", workout_id)
    return MessageResponse(message="Workout deleted successfully")
