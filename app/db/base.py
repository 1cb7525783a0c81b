"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.activity import Activity  # noqa: F401
from app.models.workout_library import WorkoutLibrary, WorkoutSegment  # noqa: F401
from app.models.workout_assignment import WorkoutAssignment  # noqa: F401
