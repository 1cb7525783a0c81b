"""Tests for calendar workout construction and plan statistics."""

import datetime

import pytest

from app.schedule.plan import summarize, to_calendar_workout
from app.schemas.calendar import CalendarWorkout
from app.schemas.workout_assignment import WorkoutAssignmentResponse


def _make_assignment(**overrides) -> WorkoutAssignmentResponse:
    defaults = {
        "id": 7,
        "workout_library_id": 3,
        "assigned_to_user_id": 1,
        "assigned_by_user_id": 2,
        "scheduled_date": datetime.date(2025, 7, 9),
        "status": "assigned",
        "priority": "high",
        "intensity_adjustment": 1.0,
        "duration_adjustment": 1.0,
        "workout_name": "VO2 5x4",
        "workout_training_type": "vo2max",
        "workout_duration": 60,
        "workout_difficulty": 8,
        "athlete_username": "bruce",
        "athlete_first_name": "Bruce",
        "athlete_last_name": "Shark",
        "coach_username": "coach_nemo",
    }
    defaults.update(overrides)
    return WorkoutAssignmentResponse(**defaults)


def _make_workout(status: str, duration: int = 60, type_: str = "endurance") -> CalendarWorkout:
    return CalendarWorkout(id=1, assignment_id=1, date="2025-07-01", name="W", type=type_, duration=duration,
                           difficulty=5, status=status, priority="normal")


class TestToCalendarWorkout:
    def test_flattens_join(self):
        workout = to_calendar_workout(_make_assignment(custom_notes="Stay seated"))
        assert workout.id == 3
        assert workout.assignment_id == 7
        assert workout.date == "2025-07-09"
        assert workout.name == "VO2 5x4"
        assert workout.type == "vo2max"
        assert workout.difficulty == 8
        assert workout.priority == "high"
        assert workout.notes == "Stay seated"

    def test_display_names(self):
        workout = to_calendar_workout(_make_assignment())
        assert workout.athlete_name == "Bruce Shark"
        assert workout.coach_name == "coach_nemo"

    @pytest.mark.parametrize(
        "adjustment, minutes",
        [(1.0, 60), (0.5, 30), (1.25, 75), (0.1, 6), (1.33, 80)],
    )
    def test_duration_adjustment(self, adjustment, minutes):
        workout = to_calendar_workout(_make_assignment(duration_adjustment=adjustment))
        assert workout.duration == minutes

    def test_timestamp_scheduled_date_keeps_its_day(self):
        workout = to_calendar_workout(_make_assignment(scheduled_date="2025-07-31T00:00:00.000Z"))
        assert workout.date == "2025-07-31"


class TestSummarize:
    def test_empty(self):
        summary = summarize([])
        assert summary.total_assigned == 0
        assert summary.completion_rate == 0.0
        assert summary.by_type == {}

    def test_counts(self):
        workouts = [
            _make_workout("completed", 60, "endurance"),
            _make_workout("completed", 45, "threshold"),
            _make_workout("in_progress", 30, "endurance"),
            _make_workout("assigned", 90, "endurance"),
        ]
        summary = summarize(workouts)
        assert summary.total_assigned == 4
        assert summary.completed == 2
        assert summary.in_progress == 1
        assert summary.completion_rate == 50.0
        assert summary.total_training_minutes == 105
        assert summary.by_type == {"endurance": 3, "threshold": 1}

    def test_rate_is_rounded(self):
        summary = summarize([_make_workout("completed"), _make_workout("assigned"), _make_workout("skipped")])
        assert summary.completion_rate == 33.3
