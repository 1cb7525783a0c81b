"""
Activity database model.

One row per completed exercise session imported from an external provider.
``start_date_local`` keeps the provider's ISO-8601 string verbatim (local
wall-clock time plus offset) so the calendar date of an activity never
depends on the timezone of the process reading it.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class Activity(SQLModel, table=True):
    """A recorded ride, run, swim or other session."""

    __tablename__ = "activities"
    __table_args__ = (UniqueConstraint("user_id", "intervals_icu_id", name="uq_activity_user_icu_id"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    intervals_icu_id: Optional[str] = Field(default=None, max_length=50)
    external_id: Optional[str] = Field(default=None, max_length=100)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    name: str = Field(nullable=False, max_length=255)
    description: Optional[str] = Field(default=None)
    activity_type: str = Field(nullable=False, max_length=50, index=True)

    # Start time
    start_date_local: str = Field(nullable=False, max_length=40, index=True)
    start_date_utc: Optional[datetime.datetime] = Field(default=None)
    timezone: Optional[str] = Field(default=None, max_length=64)

    # Durations (seconds) and distance (meters)
    elapsed_time: Optional[int] = Field(default=None)
    moving_time: Optional[int] = Field(default=None)
    recording_time: Optional[int] = Field(default=None)
    distance: Optional[float] = Field(default=None)

    # Speed
    average_speed: Optional[float] = Field(default=None)
    max_speed: Optional[float] = Field(default=None)

    # Power
    has_power_data: bool = Field(default=False, nullable=False)
    average_watts: Optional[float] = Field(default=None)
    weighted_avg_watts: Optional[float] = Field(default=None)
    max_watts: Optional[float] = Field(default=None)
    normalized_power: Optional[float] = Field(default=None)
    ftp_watts: Optional[int] = Field(default=None)

    # Heart rate and cadence
    has_heartrate: bool = Field(default=False, nullable=False)
    average_heartrate: Optional[float] = Field(default=None)
    max_heartrate: Optional[float] = Field(default=None)
    average_cadence: Optional[float] = Field(default=None)

    # Training load
    training_load: Optional[float] = Field(default=None)
    intensity_factor: Optional[float] = Field(default=None)
    training_stress_score: Optional[float] = Field(default=None)
    calories: Optional[float] = Field(default=None)
    elevation_gain: Optional[float] = Field(default=None)

    # Zone distributions, seconds per zone
    power_zone_times: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))
    hr_zone_times: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))

    # Flags
    trainer: bool = Field(default=False, nullable=False)
    commute: bool = Field(default=False, nullable=False)
    race: bool = Field(default=False, nullable=False)

    # Provenance
    source: str = Field(default="intervals.icu", max_length=50, nullable=False)
    synced_at: Optional[datetime.datetime] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
