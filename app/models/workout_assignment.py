"""
Workout assignment database model.

Binds one workout template to one athlete on one calendar date.
``scheduled_date`` is a plain date: it has no time or timezone component,
so the day a coach picked is the day every viewer sees.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class WorkoutAssignment(SQLModel, table=True):
    """A coach-scheduled workout for an athlete."""

    __tablename__ = "workout_assignments"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_library_id: int = Field(foreign_key="workout_library.id", nullable=False, index=True)
    assigned_to_user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    assigned_by_user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    scheduled_date: datetime.date = Field(nullable=False, index=True)

    status: str = Field(default="assigned", max_length=20, nullable=False)
    priority: str = Field(default="normal", max_length=20, nullable=False)

    # Multipliers applied to the template's base intensity / duration
    intensity_adjustment: float = Field(default=1.0, nullable=False)
    duration_adjustment: float = Field(default=1.0, nullable=False)

    custom_notes: Optional[str] = Field(default=None, max_length=2000)
    completed_at: Optional[datetime.datetime] = Field(default=None)
    athlete_feedback: Optional[str] = Field(default=None, max_length=2000)
    coach_review: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
