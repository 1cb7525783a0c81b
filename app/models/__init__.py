"""SQLModel database models."""

from app.models.user import User
from app.models.activity import Activity
from app.models.workout_library import WorkoutLibrary, WorkoutSegment
from app.models.workout_assignment import WorkoutAssignment

__all__ = [
    "User",
    "Activity",
    "WorkoutLibrary",
    "WorkoutSegment",
    "WorkoutAssignment",
]
