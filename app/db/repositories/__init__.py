"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.activity import ActivityRepository
from app.db.repositories.workout_library import WorkoutLibraryRepository
from app.db.repositories.workout_assignment import AssignmentRow, WorkoutAssignmentRepository

__all__ = [
    "UserRepository",
    "ActivityRepository",
    "WorkoutLibraryRepository",
    "WorkoutAssignmentRepository",
    "AssignmentRow",
]
