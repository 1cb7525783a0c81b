"""
Source collections for the calendar.

The aggregator reads activities and workout assignments through two small
interfaces.  Two implementations exist for each:

* database-backed sources run the service queries in a worker thread, with
  a fresh session per fetch so both fetches can run at the same time;
* HTTP-backed sources call the REST API with :mod:`httpx`.

Any failure while fetching is reported as :class:`UpstreamFetchError`.
"""

from __future__ import annotations

import asyncio
import datetime
from abc import ABC, abstractmethod
from typing import Callable, Optional

import httpx
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.schedule.errors import UpstreamFetchError
from app.schemas.activity import ActivityListResponse, ActivityResponse
from app.schemas.workout_assignment import WorkoutAssignmentListResponse, WorkoutAssignmentResponse
from app.services.activity_service import ActivityService
from app.services.workout_assignment_service import WorkoutAssignmentService


class ActivitySource(ABC):
    """Reads activities by local start date."""

    name = "activities"

    @abstractmethod
    async def fetch_range(self, user_id: int, start: datetime.date, end: datetime.date,
                          page_size: Optional[int] = None, ) -> list[ActivityResponse]:
        """Every activity of ``user_id`` whose local start date is in ``[start, end]``.

        ``page_size`` only sets how many rows are requested at a time; the
        result is never truncated.
        """


class AssignmentSource(ABC):
    """Reads workout assignments by scheduled date."""

    name = "workout assignments"

    @abstractmethod
    async def fetch_range(self, user_id: int, start: datetime.date,
                          end: datetime.date, ) -> list[WorkoutAssignmentResponse]:
        """Assignments of ``user_id`` scheduled in ``[start, end]``, joined with template and users."""


# ======================================================================
# Database-backed sources
# ======================================================================


class DatabaseActivitySource(ActivitySource):
    """Reads the whole range in one query; ``page_size`` does not apply."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    async def fetch_range(self, user_id: int, start: datetime.date, end: datetime.date,
                          page_size: Optional[int] = None, ) -> list[ActivityResponse]:
        try:
            return await asyncio.to_thread(self._query, user_id, start, end)
        except SQLAlchemyError as e:
            raise UpstreamFetchError(self.name, str(e)) from e

    def _query(self, user_id: int, start: datetime.date, end: datetime.date) -> list[ActivityResponse]:
        with self.session_factory() as session:
            return ActivityService(session).get_range(user_id, start, end)


class DatabaseAssignmentSource(AssignmentSource):

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    async def fetch_range(self, user_id: int, start: datetime.date,
                          end: datetime.date, ) -> list[WorkoutAssignmentResponse]:
        try:
            return await asyncio.to_thread(self._query, user_id, start, end)
        except SQLAlchemyError as e:
            raise UpstreamFetchError(self.name, str(e)) from e

    def _query(self, user_id: int, start: datetime.date, end: datetime.date) -> list[WorkoutAssignmentResponse]:
        with self.session_factory() as session:
            return WorkoutAssignmentService(session).get_range(user_id, start, end)


# ======================================================================
# HTTP-backed sources
# ======================================================================


def create_http_client(base_url: Optional[str] = None, timeout: Optional[float] = None) -> httpx.AsyncClient:
    """Async client pointed at the REST API (``settings.BACKEND_API_URL`` by default)."""
    return httpx.AsyncClient(base_url=base_url or settings.BACKEND_API_URL,
                             timeout=timeout or settings.HTTP_TIMEOUT_SECONDS,
                             headers={"Accept": "application/json"})


class HttpActivitySource(ActivitySource):
    """``GET /activities?user=&start_date_from=&start_date_to=``, all pages, oldest first."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def fetch_range(self, user_id: int, start: datetime.date, end: datetime.date,
                          page_size: Optional[int] = None, ) -> list[ActivityResponse]:
        limit = page_size or settings.ACTIVITY_FETCH_LIMIT
        activities: list[ActivityResponse] = []
        page = 1
        while True:
            params = {"user": user_id, "start_date_from": start.isoformat(), "start_date_to": end.isoformat(),
                      "sort_by": "start_date_local", "sort_order": "asc", "page": page, "limit": limit, }
            try:
                response = await self.client.get("/activities", params=params)
                response.raise_for_status()
                payload = ActivityListResponse.model_validate(response.json())
            except (httpx.HTTPError, ValueError) as e:
                raise UpstreamFetchError(self.name, str(e)) from e

            activities.extend(payload.activities)
            if not payload.activities or len(activities) >= payload.total:
                if page > 1:
                    logger.debug(f"Read {len(activities)} activities for user {user_id} in {page} pages")
                return activities
            page += 1


class HttpAssignmentSource(AssignmentSource):
    """``GET /workout-assignments?assigned_to_user_id=&scheduled_date_from=&scheduled_date_to=``, all pages."""

    page_size = 100

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def fetch_range(self, user_id: int, start: datetime.date,
                          end: datetime.date, ) -> list[WorkoutAssignmentResponse]:
        assignments: list[WorkoutAssignmentResponse] = []
        page = 1
        while True:
            params = {"assigned_to_user_id": user_id, "scheduled_date_from": start.isoformat(),
                      "scheduled_date_to": end.isoformat(), "page": page, "limit": self.page_size, }
            try:
                response = await self.client.get("/workout-assignments", params=params)
                response.raise_for_status()
                payload = WorkoutAssignmentListResponse.model_validate(response.json())
            except (httpx.HTTPError, ValueError) as e:
                raise UpstreamFetchError(self.name, str(e)) from e

            assignments.extend(payload.assignments)
            if not payload.assignments or len(assignments) >= payload.total:
                return assignments
            page += 1
