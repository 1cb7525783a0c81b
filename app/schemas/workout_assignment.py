"""
Workout assignment API schemas.

Responses flatten the assignment together with its template and the
athlete/coach user records, matching what the calendar consumes.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from app.models.enums import AssignmentPriority, AssignmentStatus


class WorkoutAssignmentCreate(BaseModel):
    """Schema for a coach assigning a workout to an athlete."""

    workout_library_id: int = Field(..., gt=0)
    assigned_to_user_id: int = Field(..., gt=0)
    assigned_by_user_id: int = Field(..., gt=0)
    scheduled_date: datetime.date = Field(..., description="Calendar day, YYYY-MM-DD")
    priority: AssignmentPriority = AssignmentPriority.NORMAL
    intensity_adjustment: float = Field(1.0, ge=0.1, le=3.0, description="Multiplier on template intensity")
    duration_adjustment: float = Field(1.0, ge=0.1, le=3.0, description="Multiplier on template duration")
    custom_notes: Optional[str] = Field(None, max_length=2000)


class WorkoutAssignmentStatusUpdate(BaseModel):
    """Schema for moving an assignment to another status."""

    status: AssignmentStatus
    completion_notes: Optional[str] = Field(None, max_length=2000)
    completion_date: Optional[datetime.datetime] = None
    coach_review: Optional[str] = Field(None, max_length=2000)


class WorkoutAssignmentResponse(BaseModel):
    """Assignment joined with template and user data."""

    id: int
    workout_library_id: int
    assigned_to_user_id: int
    assigned_by_user_id: int
    scheduled_date: datetime.date
    status: str
    priority: str
    intensity_adjustment: float
    duration_adjustment: float
    custom_notes: Optional[str] = None
    completed_at: Optional[datetime.datetime] = None
    athlete_feedback: Optional[str] = None
    coach_review: Optional[str] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    # Joined from workout_library
    workout_name: str
    workout_description: Optional[str] = None
    workout_training_type: str
    workout_duration: int
    workout_difficulty: int

    # Joined from users
    athlete_username: str
    athlete_first_name: Optional[str] = None
    athlete_last_name: Optional[str] = None
    coach_username: str
    coach_first_name: Optional[str] = None
    coach_last_name: Optional[str] = None

    @field_validator("scheduled_date", mode="before")
    @classmethod
    def _strip_time(cls, value: Any) -> Any:
        # Older rows were serialised as timestamps; only the date part is meaningful.
        if isinstance(value, str) and "T" in value:
            return value.partition("T")[0]
        return value


class WorkoutAssignmentListResponse(BaseModel):
    success: bool = True
    assignments: list[WorkoutAssignmentResponse]
    total: int
    page: int
    limit: int


class DeleteResponse(BaseModel):
    success: bool
    message: str
