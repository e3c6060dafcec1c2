"""ORM models - import all so Base.metadata is complete for migrations."""

from fittrack.models.user import User
from fittrack.models.workout import Workout, WorkoutExercise, WorkoutSet

__all__ = [
    "User",
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
]
