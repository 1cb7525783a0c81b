"""
Calendar view schemas.

A :class:`CalendarWorkout` is the flattened, display-ready form of an
assignment; a :class:`MonthlyPlan` is every workout of one month.  Day
buckets combine workouts and activities under a ``YYYY-MM-DD`` key.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.activity import ActivityResponse


class CalendarWorkout(BaseModel):
    """One assigned workout as shown on the calendar."""

    id: int = Field(..., description="Workout template id")
    assignment_id: int
    date: str = Field(..., description="Scheduled day, YYYY-MM-DD")
    name: str
    type: str
    duration: int = Field(..., description="Minutes, after duration adjustment")
    difficulty: int
    status: str
    priority: str
    notes: Optional[str] = None
    athlete_name: Optional[str] = None
    coach_name: Optional[str] = None


class MonthlyPlan(BaseModel):
    year: int
    month: int
    workouts: list[CalendarWorkout]


class WeeklyPlan(BaseModel):
    week_start: str
    week_end: str
    workouts: list[CalendarWorkout]


class DayBucket(BaseModel):
    """Everything that happens on one calendar day."""

    date: str
    activities: list[ActivityResponse] = Field(default_factory=list)
    workouts: list[CalendarWorkout] = Field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.activities) + len(self.workouts)


class PlanSummary(BaseModel):
    """Aggregate statistics over a set of calendar workouts."""

    total_assigned: int
    completed: int
    in_progress: int
    completion_rate: float = Field(..., description="Percentage of assigned workouts completed")
    total_training_minutes: int = Field(..., description="Minutes of completed workouts")
    by_type: dict[str, int]


# ----------------------------------------------------------------------
# Endpoint payloads
# ----------------------------------------------------------------------


class StyledActivity(BaseModel):
    activity: ActivityResponse
    icon: str
    color: str
    duration_label: str
    distance_label: str


class StyledWorkout(BaseModel):
    workout: CalendarWorkout
    status_color: str
    priority_color: str
    type_color: str


class CalendarDay(BaseModel):
    date: datetime.date
    activities: list[StyledActivity]
    workouts: list[StyledWorkout]


class MonthlyCalendarResponse(BaseModel):
    """Month view: range, classified day buckets and a workout summary."""

    user_id: int
    year: int
    month: int
    start_date: str
    end_date: str
    days: list[CalendarDay]
    activity_count: int
    workout_count: int
    summary: PlanSummary
