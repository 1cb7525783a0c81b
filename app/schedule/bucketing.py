"""
Date bucketing.

Two pure functions turn each source collection into a mapping keyed by
``YYYY-MM-DD``; a third merges the two mappings into day buckets.

Activities are keyed by the date part of ``start_date_local`` taken as a
string.  Parsing it into an aware datetime and converting to the reader's
timezone would move late-evening and early-morning rides to the wrong day,
so the recorded local date is authoritative.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from app.schemas.activity import ActivityResponse
from app.schemas.calendar import CalendarWorkout, DayBucket


def activity_date_key(activity: ActivityResponse) -> str:
    """``YYYY-MM-DD`` on which the activity was recorded, local to where it happened."""
    return activity.start_date_local.partition("T")[0].partition(" ")[0]


def group_activities_by_date(activities: Iterable[ActivityResponse]) -> dict[str, list[ActivityResponse]]:
    grouped: dict[str, list[ActivityResponse]] = defaultdict(list)
    for activity in activities:
        grouped[activity_date_key(activity)].append(activity)
    return dict(grouped)


def group_workouts_by_date(workouts: Iterable[CalendarWorkout]) -> dict[str, list[CalendarWorkout]]:
    """Bucket workouts by scheduled day.  Identical assignments stay separate entries."""
    grouped: dict[str, list[CalendarWorkout]] = defaultdict(list)
    for workout in workouts:
        grouped[workout.date].append(workout)
    return dict(grouped)


def merge_buckets(activities_by_date: dict[str, list[ActivityResponse]],
                  workouts_by_date: dict[str, list[CalendarWorkout]], ) -> dict[str, DayBucket]:
    """Combine both mappings into one :class:`DayBucket` per date, ordered by date."""
    dates = sorted(set(activities_by_date) | set(workouts_by_date))
    return {
        day: DayBucket(date=day, activities=list(activities_by_date.get(day, [])),
                       workouts=list(workouts_by_date.get(day, [])))
        for day in dates
    }


def bucket_by_date(activities: Iterable[ActivityResponse], workouts: Iterable[CalendarWorkout]) -> dict[str, DayBucket]:
    return merge_buckets(group_activities_by_date(activities), group_workouts_by_date(workouts))
