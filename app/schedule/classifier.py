"""
Status, priority and activity-type classification for calendar display.

Every function here is a total mapping: unknown or missing values fall back
to a default and never raise.
"""

from __future__ import annotations

from typing import Optional

# ======================================================================
# Policy tables
# ======================================================================

DEFAULT_STATUS_COLOR = "cyan"
DEFAULT_PRIORITY_COLOR = "gray"
DEFAULT_ACTIVITY_ICON = "🦈"
DEFAULT_ACTIVITY_COLOR = "gray"
DEFAULT_WORKOUT_TYPE_COLOR = "gray"

STATUS_COLORS: dict[str, str] = {
    "completed": "green",
    "in_progress": "blue",
    "assigned": "cyan",
    "skipped": "gray",
    "cancelled": "red",
}

PRIORITY_COLORS: dict[str, str] = {
    "urgent": "red",
    "high": "orange",
    "normal": "cyan",
    "low": "gray",
}

# (icon, color) per activity type, including the provider's long-form aliases
ACTIVITY_STYLES: dict[str, tuple[str, str]] = {
    "Ride": ("🚴", "blue"),
    "Cycling": ("🚴", "blue"),
    "VirtualRide": ("🚴", "blue"),
    "Run": ("🏃", "red"),
    "Running": ("🏃", "red"),
    "Swim": ("🏊", "cyan"),
    "Swimming": ("🏊", "cyan"),
    "Walk": ("🚶", "green"),
    "Walking": ("🚶", "green"),
    "Workout": ("💪", "purple"),
    "CrossTraining": ("🏋️", "orange"),
}

WORKOUT_TYPE_COLORS: dict[str, str] = {
    "threshold": "red",
    "vo2max": "purple",
    "endurance": "blue",
    "zone2": "blue",
    "sprint": "yellow",
    "recovery": "green",
}


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip().lower()


# ======================================================================
# Classification
# ======================================================================


def status_color(status: Optional[str]) -> str:
    """Color of a workout assignment status."""
    return STATUS_COLORS.get(_normalize(status), DEFAULT_STATUS_COLOR)


def priority_color(priority: Optional[str]) -> str:
    """Ring color of a workout assignment priority."""
    return PRIORITY_COLORS.get(_normalize(priority), DEFAULT_PRIORITY_COLOR)


def activity_icon(activity_type: Optional[str]) -> str:
    style = ACTIVITY_STYLES.get((activity_type or "").strip())
    return style[0] if style else DEFAULT_ACTIVITY_ICON


def activity_color(activity_type: Optional[str]) -> str:
    style = ACTIVITY_STYLES.get((activity_type or "").strip())
    return style[1] if style else DEFAULT_ACTIVITY_COLOR


def workout_type_color(training_type: Optional[str]) -> str:
    return WORKOUT_TYPE_COLORS.get(_normalize(training_type), DEFAULT_WORKOUT_TYPE_COLOR)


# ======================================================================
# Labels
# ======================================================================


def format_duration(seconds: Optional[float]) -> str:
    """``1:05h`` for an hour or more, ``45min`` below, ``0:00`` when unknown."""
    if not seconds or seconds < 0:
        return "0:00"
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes = remainder // 60
    if hours > 0:
        return f"{hours}:{minutes:02d}h"
    return f"{minutes}min"


def format_distance(meters: Optional[float]) -> str:
    """Kilometres with one decimal, ``0km`` when unknown."""
    if not meters or meters < 0:
        return "0km"
    return f"{meters / 1000:.1f}km"
