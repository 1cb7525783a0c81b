"""
Activity API schemas.

``start_date_local`` travels as the provider's ISO-8601 string.  It is
validated for shape but never converted, so its date part is the date the
activity was recorded on.
"""

import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ActivityBase(BaseModel):
    """Fields shared by activity creation and responses."""

    intervals_icu_id: Optional[str] = None
    external_id: Optional[str] = None
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    activity_type: str = Field(..., max_length=50, description="Ride, Run, Swim, Walk, Workout, CrossTraining, ...")

    start_date_local: str = Field(..., description="Local start time, ISO-8601 with offset")
    start_date_utc: Optional[datetime.datetime] = None
    timezone: Optional[str] = None

    elapsed_time: Optional[int] = Field(None, ge=0, description="Seconds")
    moving_time: Optional[int] = Field(None, ge=0, description="Seconds")
    recording_time: Optional[int] = Field(None, ge=0, description="Seconds")
    distance: Optional[float] = Field(None, ge=0, description="Meters")

    average_speed: Optional[float] = None
    max_speed: Optional[float] = None

    has_power_data: bool = False
    average_watts: Optional[float] = None
    weighted_avg_watts: Optional[float] = None
    max_watts: Optional[float] = None
    normalized_power: Optional[float] = None
    ftp_watts: Optional[int] = None

    has_heartrate: bool = False
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    average_cadence: Optional[float] = None

    training_load: Optional[float] = None
    intensity_factor: Optional[float] = None
    training_stress_score: Optional[float] = None
    calories: Optional[float] = None
    elevation_gain: Optional[float] = None

    power_zone_times: Optional[dict[str, Any]] = None
    hr_zone_times: Optional[dict[str, Any]] = None

    trainer: bool = False
    commute: bool = False
    race: bool = False

    source: str = "intervals.icu"
    synced_at: Optional[datetime.datetime] = None

    @field_validator("start_date_local")
    @classmethod
    def _check_local_date(cls, value: str) -> str:
        date_part = value.partition("T")[0].partition(" ")[0]
        try:
            datetime.date.fromisoformat(date_part)
        except ValueError:
            raise ValueError(f"start_date_local must start with a YYYY-MM-DD date, got {value!r}")
        return value


class ActivityCreate(ActivityBase):
    """Schema for ingesting an activity for a user."""

    user_id: int = Field(..., gt=0)


class ActivityResponse(ActivityBase):
    """Schema for an activity in API responses."""

    id: int
    user_id: int
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True


class ActivityListResponse(BaseModel):
    """Paginated activity listing."""

    success: bool = True
    activities: list[ActivityResponse]
    total: int
    page: int
    limit: int
