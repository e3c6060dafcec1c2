"""Shared enums for models and API."""

from enum import Enum


class ActivityKind(str, Enum):
    """What kind of session a workout is.

    UNSPECIFIED covers records saved before the kind existed; they are
    treated as strength when filtering and syncing.
    """

    STRENGTH = "strength"
    CARDIO = "cardio"
    UNSPECIFIED = "unspecified"


class SortOrder(str, Enum):
    """Date ordering of a workout list."""

    NEWEST_FIRST = "newest_first"
    OLDEST_FIRST = "oldest_first"

    def toggled(self) -> "SortOrder":
        if self is SortOrder.NEWEST_FIRST:
            return SortOrder.OLDEST_FIRST
        return SortOrder.NEWEST_FIRST
