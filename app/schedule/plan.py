"""
Monthly plan construction.

Flattens assignment join rows into :class:`CalendarWorkout` entries and
computes plan statistics.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from app.models.enums import AssignmentStatus
from app.schedule.month_range import format_local_date
from app.schemas.calendar import CalendarWorkout, PlanSummary
from app.schemas.workout_assignment import WorkoutAssignmentResponse


def _display_name(username: str, first_name: str | None, last_name: str | None) -> str:
    full_name = " ".join(part for part in (first_name, last_name) if part)
    return full_name or username


def to_calendar_workout(assignment: WorkoutAssignmentResponse) -> CalendarWorkout:
    """Flatten one assignment join row for the calendar.

    ``duration`` is the template duration scaled by the assignment's
    ``duration_adjustment``, rounded to whole minutes.
    """
    return CalendarWorkout(
        id=assignment.workout_library_id,
        assignment_id=assignment.id,
        date=format_local_date(assignment.scheduled_date),
        name=assignment.workout_name,
        type=assignment.workout_training_type,
        duration=round(assignment.workout_duration * (assignment.duration_adjustment or 1.0)),
        difficulty=assignment.workout_difficulty,
        status=assignment.status,
        priority=assignment.priority,
        notes=assignment.custom_notes,
        athlete_name=_display_name(assignment.athlete_username, assignment.athlete_first_name,
                                   assignment.athlete_last_name),
        coach_name=_display_name(assignment.coach_username, assignment.coach_first_name, assignment.coach_last_name),
    )


def summarize(workouts: Iterable[CalendarWorkout]) -> PlanSummary:
    """Completion statistics for a set of workouts."""
    workouts = list(workouts)
    completed = [w for w in workouts if w.status == AssignmentStatus.COMPLETED.value]
    in_progress = sum(1 for w in workouts if w.status == AssignmentStatus.IN_PROGRESS.value)
    total = len(workouts)
    return PlanSummary(
        total_assigned=total,
        completed=len(completed),
        in_progress=in_progress,
        completion_rate=round(len(completed) / total * 100, 1) if total else 0.0,
        total_training_minutes=sum(w.duration for w in completed),
        by_type=dict(Counter(w.type for w in workouts)),
    )
