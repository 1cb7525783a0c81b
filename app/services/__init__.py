"""Business logic services."""

from app.services.user_service import UserService
from app.services.activity_service import ActivityService
from app.services.workout_library_service import WorkoutLibraryService
from app.services.workout_assignment_service import WorkoutAssignmentService

__all__ = [
    "UserService",
    "ActivityService",
    "WorkoutLibraryService",
    "WorkoutAssignmentService",
]
