"""Tests for calendar display classification."""

import pytest

from app.schedule.classifier import (
    DEFAULT_ACTIVITY_ICON,
    activity_color,
    activity_icon,
    format_distance,
    format_duration,
    priority_color,
    status_color,
    workout_type_color,
)


class TestStatusColor:
    @pytest.mark.parametrize(
        "status, color",
        [
            ("completed", "green"),
            ("in_progress", "blue"),
            ("assigned", "cyan"),
            ("skipped", "gray"),
            ("cancelled", "red"),
            ("COMPLETED", "green"),
        ],
    )
    def test_known(self, status, color):
        assert status_color(status) == color

    @pytest.mark.parametrize("status", ["archived", "", None])
    def test_unknown_defaults_to_cyan(self, status):
        assert status_color(status) == "cyan"


class TestPriorityColor:
    @pytest.mark.parametrize(
        "priority, color",
        [("urgent", "red"), ("high", "orange"), ("normal", "cyan"), ("low", "gray")],
    )
    def test_known(self, priority, color):
        assert priority_color(priority) == color

    @pytest.mark.parametrize("priority", ["critical", None])
    def test_unknown_defaults_to_gray(self, priority):
        assert priority_color(priority) == "gray"


class TestActivityStyle:
    @pytest.mark.parametrize(
        "activity_type, color",
        [
            ("Ride", "blue"),
            ("Cycling", "blue"),
            ("Run", "red"),
            ("Running", "red"),
            ("Swim", "cyan"),
            ("Swimming", "cyan"),
            ("Walk", "green"),
            ("Walking", "green"),
            ("Workout", "purple"),
            ("CrossTraining", "orange"),
        ],
    )
    def test_known_colors(self, activity_type, color):
        assert activity_color(activity_type) == color
        assert activity_icon(activity_type) != DEFAULT_ACTIVITY_ICON

    @pytest.mark.parametrize("activity_type", ["Kayaking", "", None])
    def test_unknown_is_a_gray_shark(self, activity_type):
        assert activity_icon(activity_type) == "🦈"
        assert activity_color(activity_type) == "gray"

    def test_ride_and_cycling_share_icon(self):
        assert activity_icon("Ride") == activity_icon("Cycling")


class TestWorkoutTypeColor:
    @pytest.mark.parametrize(
        "training_type, color",
        [
            ("threshold", "red"),
            ("vo2max", "purple"),
            ("endurance", "blue"),
            ("zone2", "blue"),
            ("sprint", "yellow"),
            ("recovery", "green"),
            ("Threshold", "red"),
            ("tempo", "gray"),
            (None, "gray"),
        ],
    )
    def test_colors(self, training_type, color):
        assert workout_type_color(training_type) == color


class TestLabels:
    @pytest.mark.parametrize(
        "seconds, label",
        [
            (None, "0:00"),
            (0, "0:00"),
            (-5, "0:00"),
            (59, "0min"),
            (45 * 60, "45min"),
            (3600, "1:00h"),
            (3900, "1:05h"),
            (2 * 3600 + 30 * 60 + 59, "2:30h"),
        ],
    )
    def test_format_duration(self, seconds, label):
        assert format_duration(seconds) == label

    @pytest.mark.parametrize(
        "meters, label",
        [(None, "0km"), (0, "0km"), (1500, "1.5km"), (12340, "12.3km"), (100000, "100.0km")],
    )
    def test_format_distance(self, meters, label):
        assert format_distance(meters) == label
