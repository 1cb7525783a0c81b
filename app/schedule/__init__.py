"""Monthly training calendar: month ranges, aggregation, bucketing and classification."""

from app.schedule.aggregator import CalendarAggregator, MonthView
from app.schedule.bucketing import bucket_by_date, group_activities_by_date, group_workouts_by_date, merge_buckets
from app.schedule.cache import MonthlyPlanCache
from app.schedule.errors import NotFoundError, ScheduleError, ScheduleLoadError, UpstreamFetchError, ValidationError
from app.schedule.month_range import MonthRange, format_local_date, next_month_start, resolve_month_range
from app.schedule.navigator import MonthNavigator
from app.schedule.plan import summarize, to_calendar_workout

__all__ = [
    "CalendarAggregator",
    "MonthView",
    "MonthNavigator",
    "MonthlyPlanCache",
    "MonthRange",
    "resolve_month_range",
    "next_month_start",
    "format_local_date",
    "bucket_by_date",
    "group_activities_by_date",
    "group_workouts_by_date",
    "merge_buckets",
    "summarize",
    "to_calendar_workout",
    "ScheduleError",
    "ValidationError",
    "NotFoundError",
    "UpstreamFetchError",
    "ScheduleLoadError",
]
