"""
Activity service.

Read access for the calendar and an ingestion entry point for the
external sync process.  Activities are never modified once stored.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.activity import ActivityRepository
from app.db.repositories.user import UserRepository
from app.models.activity import Activity
from app.schemas.activity import ActivityCreate, ActivityListResponse, ActivityResponse


class ActivityService:
    """Service for activity business logic."""

    def __init__(self, session: Session):
        self.repository = ActivityRepository(session)
        self.users = UserRepository(session)

    def create(self, data: ActivityCreate) -> ActivityResponse:
        if not self.users.get_by_id(data.user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        if data.intervals_icu_id and self.repository.get_by_provider_id(data.user_id, data.intervals_icu_id):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Activity {data.intervals_icu_id} already imported for this user", )

        entry = self.repository.create(Activity(**data.model_dump()))
        logger.info(f"Stored {entry.activity_type} '{entry.name}' for user {entry.user_id} on "
                    f"{entry.start_date_local}")
        return ActivityResponse.model_validate(entry)

    def get_by_id(self, activity_id: int) -> ActivityResponse:
        entry = self.repository.get_by_id(activity_id)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
        return ActivityResponse.model_validate(entry)

    def get_range(self, user_id: int, start: datetime.date, end: datetime.date,
                  limit: Optional[int] = None, ) -> list[ActivityResponse]:
        """All activities whose local start date is within ``[start, end]``."""
        entries = self.repository.get_by_user_local_date_range(user_id, start, end, limit=limit)
        return [ActivityResponse.model_validate(e) for e in entries]

    def search(self, user_id: int, *, page: int = 1, limit: int = 20, **filters) -> ActivityListResponse:
        entries, total = self.repository.search(user_id, skip=(page - 1) * limit, limit=limit, **filters)
        return ActivityListResponse(activities=[ActivityResponse.model_validate(e) for e in entries], total=total,
                                    page=page, limit=limit, )
