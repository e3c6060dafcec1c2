"""Workout, WorkoutExercise and WorkoutSet models.

A workout owns its exercises and each exercise owns its sets: deleting a
workout (or dropping an exercise from its list) deletes the children too.
Cardio intervals are stored as exercises; their sets keep distance in
``weight``, duration minutes in ``reps`` and pace in ``rpe``.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fittrack.core.enums import ActivityKind
from fittrack.db.base import Base


class Workout(Base):
    """A dated session with duration, overall RPE and a derived calorie estimate."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_user_date", "user_id", "workout_date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    )
    workout_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    workout_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    duration_hours: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    overall_rpe: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    estimated_calories: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    activity_type: Mapped[ActivityKind] = mapped_column(
        Enum(ActivityKind), nullable=False, default=ActivityKind.UNSPECIFIED
    )
    # Server bookkeeping; unset until the workout has been synced
    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    user: Mapped["User | None"] = relationship("User", back_populates="workouts")
    exercises: Mapped[list["WorkoutExercise"]] = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.order",
    )


class WorkoutExercise(Base):
    """Named, ordered group of sets (an interval for cardio) with free-text notes."""

    __tablename__ = "workout_exercises"
    __table_args__ = (Index("ix_workout_exercises_workout_id", "workout_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    order: Mapped[int] = mapped_column("position", Integer, nullable=False, default=0)

    workout: Mapped["Workout"] = relationship("Workout", back_populates="exercises")
    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet",
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="WorkoutSet.set_order",
    )

    def __init__(self, **kwargs):
        # column defaults only land at INSERT; unsaved exercises need them too
        kwargs.setdefault("id", uuid.uuid4())
        kwargs.setdefault("name", "")
        kwargs.setdefault("notes", "")
        kwargs.setdefault("order", 0)
        super().__init__(**kwargs)


class WorkoutSet(Base):
    """One performance record: raw weight/reps text plus optional RPE."""

    __tablename__ = "workout_sets"
    __table_args__ = (Index("ix_workout_sets_exercise_id", "exercise_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False
    )
    set_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    weight: Mapped[str] = mapped_column(String(50), nullable=False, default="")  # weight or distance
    reps: Mapped[str] = mapped_column(String(50), nullable=False, default="")  # reps or duration minutes
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)  # rating or pace

    exercise: Mapped["WorkoutExercise"] = relationship("WorkoutExercise", back_populates="sets")

    def __init__(self, **kwargs):
        kwargs.setdefault("id", uuid.uuid4())
        kwargs.setdefault("set_order", 0)
        kwargs.setdefault("weight", "")
        kwargs.setdefault("reps", "")
        super().__init__(**kwargs)
