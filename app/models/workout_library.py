"""
Workout library models.

A :class:`WorkoutLibrary` row is a reusable workout template; its
:class:`WorkoutSegment` rows describe the ordered blocks of the workout.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class WorkoutLibrary(SQLModel, table=True):
    """A workout template coaches assign to athletes."""

    __tablename__ = "workout_library"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255, index=True)
    description: Optional[str] = Field(default=None)
    training_type: str = Field(nullable=False, max_length=50, index=True)

    primary_control_parameter: str = Field(default="power", max_length=50)
    secondary_control_parameter: Optional[str] = Field(default=None, max_length=50)

    estimated_duration_minutes: int = Field(nullable=False, ge=1)
    difficulty_level: int = Field(default=5, ge=1, le=10)
    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    is_public: bool = Field(default=False)
    is_active: bool = Field(default=True)
    created_by: Optional[int] = Field(default=None, foreign_key="users.id")

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class WorkoutSegment(SQLModel, table=True):
    """One ordered block (warmup, interval, rest...) of a workout template."""

    __tablename__ = "workout_segments"
    __table_args__ = (UniqueConstraint("workout_library_id", "segment_order", name="uq_segment_workout_order"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_library_id: int = Field(foreign_key="workout_library.id", nullable=False, index=True)
    segment_order: int = Field(nullable=False, ge=1)
    segment_type: str = Field(nullable=False, max_length=20)
    name: Optional[str] = Field(default=None, max_length=255)
    duration_minutes: float = Field(nullable=False)

    # Targets, as percentage of FTP / max HR unless stated otherwise
    power_min_percent: Optional[float] = Field(default=None)
    power_max_percent: Optional[float] = Field(default=None)
    hr_min_percent: Optional[float] = Field(default=None)
    hr_max_percent: Optional[float] = Field(default=None)
    cadence_min: Optional[int] = Field(default=None)
    cadence_max: Optional[int] = Field(default=None)
    rpe_min: Optional[int] = Field(default=None)
    rpe_max: Optional[int] = Field(default=None)

    repetitions: int = Field(default=1, ge=1)
    rest_duration_minutes: Optional[float] = Field(default=None)
    instructions: Optional[str] = Field(default=None)
