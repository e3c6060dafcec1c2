"""Split workouts into the strength and cardio lists and sort them by date."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fittrack.core.dates import as_utc
from fittrack.core.enums import ActivityKind, SortOrder
from fittrack.models.workout import Workout


def is_cardio(workout: Workout) -> bool:
    return workout.activity_type is ActivityKind.CARDIO


def is_strength(workout: Workout) -> bool:
    """Strength, or saved before workouts carried a kind."""
    return workout.activity_type in (None, ActivityKind.STRENGTH, ActivityKind.UNSPECIFIED)


def sort_by_date(workouts: Iterable[Workout], order: SortOrder) -> list[Workout]:
    # sorted() is stable, so equal dates keep their input order
    return sorted(
        workouts,
        key=lambda w: as_utc(w.workout_date),
        reverse=order is SortOrder.NEWEST_FIRST,
    )


def strength_view(workouts: Iterable[Workout], order: SortOrder = SortOrder.NEWEST_FIRST) -> list[Workout]:
    return sort_by_date((w for w in workouts if is_strength(w)), order)


def cardio_view(workouts: Iterable[Workout], order: SortOrder = SortOrder.NEWEST_FIRST) -> list[Workout]:
    return sort_by_date((w for w in workouts if is_cardio(w)), order)


def partition(workouts: Iterable[Workout]) -> tuple[list[Workout], list[Workout]]:
    """(strength, cardio) in input order; every workout lands in exactly one."""
    strength: list[Workout] = []
    cardio: list[Workout] = []
    for workout in workouts:
        (cardio if is_cardio(workout) else strength).append(workout)
    return strength, cardio


@dataclass
class ActivityViews:
    """Sort state of the two activity lists; each toggles on its own."""

    strength_order: SortOrder = SortOrder.NEWEST_FIRST
    cardio_order: SortOrder = SortOrder.NEWEST_FIRST

    def toggle_strength_order(self) -> SortOrder:
        self.strength_order = self.strength_order.toggled()
        return self.strength_order

    def toggle_cardio_order(self) -> SortOrder:
        self.cardio_order = self.cardio_order.toggled()
        return self.cardio_order

    def strength(self, workouts: Iterable[Workout]) -> list[Workout]:
        return strength_view(workouts, self.strength_order)

    def cardio(self, workouts: Iterable[Workout]) -> list[Workout]:
        return cardio_view(workouts, self.cardio_order)
