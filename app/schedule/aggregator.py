"""
Calendar aggregation.

Fetches a user's activities and workout assignments for a date range and
buckets both by calendar day.  The two fetches are independent and run
concurrently; if either fails the whole load fails, so a month is never
shown with one of its collections silently missing.
"""

from __future__ import annotations

import asyncio
import datetime
from typing import Optional

from loguru import logger
from pydantic import BaseModel

from app.core.config import settings
from app.schedule.bucketing import bucket_by_date
from app.schedule.cache import MonthlyPlanCache
from app.schedule.errors import ScheduleLoadError, UpstreamFetchError, ValidationError
from app.schedule.month_range import MonthRange, format_local_date, resolve_month_range, resolve_week_range
from app.schedule.plan import summarize, to_calendar_workout
from app.schedule.sources import ActivitySource, AssignmentSource
from app.schemas.activity import ActivityResponse
from app.schemas.calendar import CalendarWorkout, DayBucket, MonthlyPlan, PlanSummary, WeeklyPlan


class MonthView(BaseModel):
    """Everything the calendar needs to render one month."""

    user_id: int
    year: int
    month: int
    month_range: MonthRange
    plan: MonthlyPlan
    activities: list[ActivityResponse]
    buckets: dict[str, DayBucket]

    @property
    def summary(self) -> PlanSummary:
        return summarize(self.plan.workouts)


def validate_user_id(user_id: int) -> None:
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
        raise ValidationError(f"user id must be a positive integer, got {user_id!r}")


class CalendarAggregator:
    """Reads calendar data for a user from an activity and an assignment source.

    Args:
        activity_source: where activities come from.
        assignment_source: where workout assignments come from.
        cache: optional monthly plan cache consulted by
            :meth:`get_monthly_plan`.
        activity_page_size: activities requested per page; every page
            of a range is read.
    """

    def __init__(self, activity_source: ActivitySource, assignment_source: AssignmentSource,
                 cache: Optional[MonthlyPlanCache] = None, activity_page_size: Optional[int] = None, ):
        self.activity_source = activity_source
        self.assignment_source = assignment_source
        self.cache = cache
        self.activity_page_size = activity_page_size or settings.ACTIVITY_FETCH_LIMIT

    # ======================================================================
    # Workouts
    # ======================================================================

    async def get_monthly_plan(self, user_id: int, year: int, month: int) -> MonthlyPlan:
        """Every workout assigned to ``user_id`` in ``(year, month)``.

        An unknown user simply has an empty plan.

        Raises:
            ValidationError: bad user id, year or month.
            ScheduleLoadError: the assignment fetch failed.
        """
        validate_user_id(user_id)
        month_range = resolve_month_range(year, month)

        cached = self._cached_plan(user_id, year, month)
        if cached is not None:
            return cached

        generation = self._plan_generation(user_id, year, month)
        try:
            plan = await self._fetch_plan(user_id, year, month, month_range)
        except UpstreamFetchError as e:
            raise self._load_error(user_id, year, month, e) from e
        self._store_plan(user_id, plan, generation)
        return plan

    async def get_weekly_plan(self, user_id: int, week_start: datetime.date) -> WeeklyPlan:
        """Workouts of the Monday-to-Sunday week containing ``week_start``."""
        validate_user_id(user_id)
        week = resolve_week_range(week_start)
        workouts = await self._fetch_workouts(user_id, week)
        start, end = week.as_strings()
        return WeeklyPlan(week_start=start, week_end=end, workouts=workouts)

    async def get_day_workouts(self, user_id: int, day: datetime.date) -> list[CalendarWorkout]:
        validate_user_id(user_id)
        return await self._fetch_workouts(user_id, MonthRange(start=day, end=day))

    async def _fetch_workouts(self, user_id: int, date_range: MonthRange) -> list[CalendarWorkout]:
        assignments = await self.assignment_source.fetch_range(user_id, date_range.start, date_range.end)
        workouts = [to_calendar_workout(a) for a in assignments]
        return sorted(workouts, key=lambda w: (w.date, w.assignment_id))

    async def _fetch_plan(self, user_id: int, year: int, month: int, month_range: MonthRange) -> MonthlyPlan:
        workouts = await self._fetch_workouts(user_id, month_range)
        return MonthlyPlan(year=year, month=month, workouts=workouts)

    def _cached_plan(self, user_id: int, year: int, month: int) -> Optional[MonthlyPlan]:
        return self.cache.get(user_id, year, month) if self.cache is not None else None

    def _plan_generation(self, user_id: int, year: int, month: int) -> Optional[int]:
        return self.cache.generation(user_id, year, month) if self.cache is not None else None

    def _store_plan(self, user_id: int, plan: MonthlyPlan, generation: Optional[int]) -> None:
        if self.cache is not None:
            self.cache.put(user_id, plan, generation=generation)

    # ======================================================================
    # Activities
    # ======================================================================

    async def get_activities_for_date_range(self, user_id: int, start: datetime.date,
                                            end: datetime.date, ) -> list[ActivityResponse]:
        """All activities whose local start date lies in ``[start, end]``, any type.

        Raises:
            ValidationError: bad user id or ``start`` after ``end``.
            UpstreamFetchError: the activity fetch failed.
        """
        validate_user_id(user_id)
        if start > end:
            raise ValidationError(f"start {format_local_date(start)} is after end {format_local_date(end)}")
        return await self.activity_source.fetch_range(user_id, start, end, page_size=self.activity_page_size)

    async def get_activities_for_month(self, user_id: int, year: int, month: int) -> list[ActivityResponse]:
        month_range = resolve_month_range(year, month)
        try:
            return await self.get_activities_for_date_range(user_id, month_range.start, month_range.end)
        except UpstreamFetchError as e:
            raise self._load_error(user_id, year, month, e) from e

    # ======================================================================
    # Month view
    # ======================================================================

    async def load_month(self, user_id: int, year: int, month: int) -> MonthView:
        """Fetch both collections concurrently and bucket them by day.

        The plan is cached only once both fetches succeeded.

        Raises:
            ValidationError: bad user id, year or month; nothing is fetched.
            ScheduleLoadError: either fetch failed.
        """
        validate_user_id(user_id)
        month_range = resolve_month_range(year, month)

        cached = self._cached_plan(user_id, year, month)
        generation = self._plan_generation(user_id, year, month)
        activities, plan = await asyncio.gather(
            self.get_activities_for_date_range(user_id, month_range.start, month_range.end),
            self._fetch_plan(user_id, year, month, month_range) if cached is None else _completed(cached),
            return_exceptions=True,
        )

        for result in (activities, plan):
            if isinstance(result, UpstreamFetchError):
                raise self._load_error(user_id, year, month, result) from result
            if isinstance(result, BaseException):
                raise result

        if cached is None:
            self._store_plan(user_id, plan, generation)
        logger.debug(f"Loaded {year:04d}-{month:02d} for user {user_id}: "
                     f"{len(activities)} activities, {len(plan.workouts)} workouts")
        return MonthView(user_id=user_id, year=year, month=month, month_range=month_range, plan=plan,
                         activities=activities, buckets=bucket_by_date(activities, plan.workouts))

    @staticmethod
    def _load_error(user_id: int, year: int, month: int, cause: UpstreamFetchError) -> ScheduleLoadError:
        logger.warning(f"Month {year:04d}-{month:02d} for user {user_id} failed: {cause}")
        return ScheduleLoadError(user_id, year, month, cause)


async def _completed(value):
    return value
