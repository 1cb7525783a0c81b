"""
Month navigation with a latest-request guard.

Switching months quickly starts several loads whose completion order is
arbitrary.  Each load carries a token; only the load holding the latest
token may change what is displayed.
"""

from __future__ import annotations

import datetime
from itertools import count
from typing import Optional

from loguru import logger

from app.schedule.aggregator import CalendarAggregator, MonthView
from app.schedule.errors import ScheduleError, ValidationError
from app.schedule.month_range import next_month, previous_month, validate_year_month


class MonthNavigator:
    """Holds the month currently displayed for one user."""

    def __init__(self, aggregator: CalendarAggregator, user_id: int, year: Optional[int] = None,
                 month: Optional[int] = None, ):
        today = datetime.date.today()
        self.aggregator = aggregator
        self.user_id = user_id
        self.year = year or today.year
        self.month = month or today.month
        validate_year_month(self.year, self.month)

        self.view: Optional[MonthView] = None
        self.error: Optional[str] = None
        self.loading = False
        self._tokens = count(1)
        self._latest = 0
        self._requested = (self.year, self.month)

    def is_latest(self, token: int) -> bool:
        return token == self._latest

    async def show(self, year: int, month: int) -> Optional[MonthView]:
        """Load ``(year, month)`` and display it unless a newer request was made meanwhile.

        ``year`` and ``month`` change only when that load is applied or fails.
        An invalid month is rejected before anything is requested and leaves
        the navigator where it was.

        Returns the view when it was applied, ``None`` when it failed or was
        superseded.
        """
        try:
            validate_year_month(year, month)
        except ValidationError as e:
            logger.debug(f"Rejected month {year}-{month} for user {self.user_id}: {e}")
            self.error = str(e)
            return None

        token = next(self._tokens)
        self._latest = token
        self._requested = (year, month)
        self.loading = True

        try:
            view = await self.aggregator.load_month(self.user_id, year, month)
        except ScheduleError as e:
            if not self.is_latest(token):
                logger.debug(f"Discarding stale failure for {year:04d}-{month:02d}: {e}")
                return None
            self.year, self.month = year, month
            self.view = None
            self.error = str(e)
            self.loading = False
            return None

        if not self.is_latest(token):
            logger.debug(f"Discarding stale view for {year:04d}-{month:02d}")
            return None
        self.year, self.month = year, month
        self.view = view
        self.error = None
        self.loading = False
        return view

    async def next(self) -> Optional[MonthView]:
        return await self.show(*next_month(*self._requested))

    async def previous(self) -> Optional[MonthView]:
        return await self.show(*previous_month(*self._requested))

    async def refresh(self) -> Optional[MonthView]:
        """Reload the most recently requested month, bypassing any cached plan."""
        year, month = self._requested
        if self.aggregator.cache is not None:
            self.aggregator.cache.invalidate(self.user_id, year, month)
        return await self.show(year, month)
