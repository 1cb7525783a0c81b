"""
Shared API dependencies.

Reusable FastAPI dependencies for the calendar: the application-wide plan
cache and an aggregator reading straight from the database.
"""

from typing import Callable

from fastapi import Depends, Request
from sqlmodel import Session

from app.db.session import get_session_factory
from app.schedule.aggregator import CalendarAggregator
from app.schedule.cache import MonthlyPlanCache
from app.schedule.sources import DatabaseActivitySource, DatabaseAssignmentSource


def get_plan_cache(request: Request) -> MonthlyPlanCache:
    """The monthly plan cache created at application startup."""
    return request.app.state.plan_cache


def get_calendar_aggregator(session_factory: Callable[[], Session] = Depends(get_session_factory),
                            cache: MonthlyPlanCache = Depends(get_plan_cache), ) -> CalendarAggregator:
    return CalendarAggregator(DatabaseActivitySource(session_factory), DatabaseAssignmentSource(session_factory),
                              cache=cache, )
