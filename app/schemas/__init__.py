"""Pydantic schemas for request/response validation."""

from app.schemas.user import UserCreate, UserResponse
from app.schemas.activity import ActivityCreate, ActivityListResponse, ActivityResponse
from app.schemas.workout_library import (
    WorkoutSegmentCreate,
    WorkoutSegmentResponse,
    WorkoutTemplateCreate,
    WorkoutTemplateDetailResponse,
    WorkoutTemplateListResponse,
    WorkoutTemplateResponse,
)
from app.schemas.workout_assignment import (
    DeleteResponse,
    WorkoutAssignmentCreate,
    WorkoutAssignmentListResponse,
    WorkoutAssignmentResponse,
    WorkoutAssignmentStatusUpdate,
)
from app.schemas.calendar import (
    CalendarWorkout,
    DayBucket,
    MonthlyCalendarResponse,
    MonthlyPlan,
    PlanSummary,
    WeeklyPlan,
)

__all__ = [
    "UserCreate",
    "UserResponse",
    "ActivityCreate",
    "ActivityListResponse",
    "ActivityResponse",
    "WorkoutSegmentCreate",
    "WorkoutSegmentResponse",
    "WorkoutTemplateCreate",
    "WorkoutTemplateDetailResponse",
    "WorkoutTemplateListResponse",
    "WorkoutTemplateResponse",
    "DeleteResponse",
    "WorkoutAssignmentCreate",
    "WorkoutAssignmentListResponse",
    "WorkoutAssignmentResponse",
    "WorkoutAssignmentStatusUpdate",
    "CalendarWorkout",
    "DayBucket",
    "MonthlyCalendarResponse",
    "MonthlyPlan",
    "PlanSummary",
    "WeeklyPlan",
]
