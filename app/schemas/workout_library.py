"""
Workout library API schemas.

Templates are created together with their ordered segments.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.models.enums import SegmentType


class WorkoutSegmentBase(BaseModel):
    """One block of a workout template."""

    segment_order: int = Field(..., ge=1)
    segment_type: SegmentType
    name: Optional[str] = Field(None, max_length=255)
    duration_minutes: float = Field(..., gt=0)
    power_min_percent: Optional[float] = Field(None, ge=0, le=300)
    power_max_percent: Optional[float] = Field(None, ge=0, le=300)
    hr_min_percent: Optional[float] = Field(None, ge=0, le=110)
    hr_max_percent: Optional[float] = Field(None, ge=0, le=110)
    cadence_min: Optional[int] = Field(None, ge=0, le=200)
    cadence_max: Optional[int] = Field(None, ge=0, le=200)
    rpe_min: Optional[int] = Field(None, ge=1, le=10)
    rpe_max: Optional[int] = Field(None, ge=1, le=10)
    repetitions: int = Field(1, ge=1, le=50)
    rest_duration_minutes: Optional[float] = Field(None, ge=0)
    instructions: Optional[str] = None


class WorkoutSegmentCreate(WorkoutSegmentBase):
    """Schema for a segment inside a template creation request."""


class WorkoutSegmentResponse(WorkoutSegmentBase):
    id: int
    workout_library_id: int
    segment_type: str

    class Config:
        from_attributes = True


class WorkoutTemplateCreate(BaseModel):
    """Schema for creating a workout template."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    training_type: str = Field(..., max_length=50, description="e.g. endurance, threshold, vo2max, sprint, recovery")
    primary_control_parameter: str = Field("power", max_length=50)
    secondary_control_parameter: Optional[str] = Field(None, max_length=50)
    estimated_duration_minutes: int = Field(..., ge=1, le=600)
    difficulty_level: int = Field(5, ge=1, le=10)
    tags: list[str] = Field(default_factory=list)
    is_public: bool = False
    created_by: Optional[int] = Field(None, gt=0)
    segments: list[WorkoutSegmentCreate] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_segment_order(self):
        orders = [segment.segment_order for segment in self.segments]
        if len(orders) != len(set(orders)):
            raise ValueError("segment_order values must be unique within a workout")
        return self


class WorkoutTemplateResponse(BaseModel):
    """Schema for a workout template in listings."""

    id: int
    name: str
    description: Optional[str]
    training_type: str
    primary_control_parameter: str
    secondary_control_parameter: Optional[str]
    estimated_duration_minutes: int
    difficulty_level: int
    tags: list[str]
    is_public: bool
    is_active: bool
    created_by: Optional[int]
    segment_count: int = 0
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class WorkoutTemplateDetailResponse(WorkoutTemplateResponse):
    """Template with its ordered segments."""

    segments: list[WorkoutSegmentResponse]


class WorkoutTemplateListResponse(BaseModel):
    success: bool = True
    workouts: list[WorkoutTemplateResponse]
    total: int
    page: int
    limit: int
