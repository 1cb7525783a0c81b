"""
Activity repository.

Handles database operations for :class:`Activity`, including the
local-date range query used by the calendar.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.activity import Activity

# Columns the list endpoint may sort by
SORTABLE_COLUMNS = {
    "start_date_local": Activity.start_date_local,
    "distance": Activity.distance,
    "moving_time": Activity.moving_time,
    "training_load": Activity.training_load,
    "name": Activity.name,
}


class ActivityRepository:
    """Repository for Activity database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: Activity) -> Activity:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, activity_id: int) -> Optional[Activity]:
        return self.session.get(Activity, activity_id)

    def get_by_provider_id(self, user_id: int, intervals_icu_id: str) -> Optional[Activity]:
        statement = select(Activity).where(Activity.user_id == user_id, Activity.intervals_icu_id == intervals_icu_id)
        return self.session.exec(statement).first()

    # ------------------------------------------------------------------
    # Range queries
    # ------------------------------------------------------------------

    def get_by_user_local_date_range(self, user_id: int, start: datetime.date,
                                     end: datetime.date, limit: Optional[int] = None, ) -> list[Activity]:
        """Activities whose *local* start date lies in ``[start, end]``.

        ``start_date_local`` is an ISO string, so the comparison is
        lexicographic: ``>= 'YYYY-MM-DD'`` of the first day and
        ``< 'YYYY-MM-DD'`` of the day after the last one.
        """
        statement = self._filtered(user_id, start_date_from=start, start_date_to=end)
        statement = statement.order_by(Activity.start_date_local, Activity.id)
        if limit is not None:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def search(self, user_id: int, *, activity_type: Optional[str] = None,
               start_date_from: Optional[datetime.date] = None, start_date_to: Optional[datetime.date] = None,
               has_power_data: Optional[bool] = None, trainer: Optional[bool] = None, source: Optional[str] = None,
               sort_by: str = "start_date_local", sort_order: str = "desc", skip: int = 0,
               limit: int = 20, ) -> tuple[list[Activity], int]:
        """Filtered, paginated listing.  Returns ``(page, total)``."""
        statement = self._filtered(user_id, activity_type=activity_type, start_date_from=start_date_from,
                                   start_date_to=start_date_to, has_power_data=has_power_data, trainer=trainer,
                                   source=source)
        total = self.session.exec(select(func.count()).select_from(statement.subquery())).one()

        column = SORTABLE_COLUMNS.get(sort_by, Activity.start_date_local)
        order = column.asc() if sort_order == "asc" else column.desc()
        statement = statement.order_by(order, Activity.id).offset(skip).limit(limit)
        return list(self.session.exec(statement).all()), total

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _filtered(user_id: int, *, activity_type: Optional[str] = None,
                  start_date_from: Optional[datetime.date] = None, start_date_to: Optional[datetime.date] = None,
                  has_power_data: Optional[bool] = None, trainer: Optional[bool] = None,
                  source: Optional[str] = None, ):
        statement = select(Activity).where(Activity.user_id == user_id)
        if activity_type:
            statement = statement.where(Activity.activity_type == activity_type)
        if start_date_from is not None:
            statement = statement.where(Activity.start_date_local >= start_date_from.isoformat())
        if start_date_to is not None:
            day_after = start_date_to + datetime.timedelta(days=1)
            statement = statement.where(Activity.start_date_local < day_after.isoformat())
        if has_power_data is not None:
            statement = statement.where(Activity.has_power_data == has_power_data)
        if trainer is not None:
            statement = statement.where(Activity.trainer == trainer)
        if source:
            statement = statement.where(Activity.source == source)
        return statement
