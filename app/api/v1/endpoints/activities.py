"""
Activity endpoints.

Recorded sessions are listed per user with filters; creation is the
ingestion entry point used by the provider sync.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.config import settings
from app.db.session import get_db
from app.schemas.activity import ActivityCreate, ActivityListResponse, ActivityResponse
from app.services.activity_service import ActivityService

router = APIRouter()


@router.get("", summary="List a user's activities.", response_model=ActivityListResponse, )
def list_activities(user: int = Query(..., gt=0, description="Owning user id"),
                    activity_type: Optional[str] = Query(None, description="Ride, Run, Swim, ..."),
                    start_date_from: Optional[datetime.date] = Query(None, description="Local start date, inclusive"),
                    start_date_to: Optional[datetime.date] = Query(None, description="Local start date, inclusive"),
                    has_power_data: Optional[bool] = Query(None), trainer: Optional[bool] = Query(None),
                    source: Optional[str] = Query(None),
                    sort_by: str = Query("start_date_local", description="Sort column"),
                    sort_order: str = Query("desc", pattern="^(asc|desc)$"),
                    page: int = Query(1, ge=1),
                    limit: int = Query(20, ge=1, le=settings.ACTIVITY_FETCH_LIMIT),
                    db: Session = Depends(get_db), ):
    return ActivityService(db).search(user, page=page, limit=limit, activity_type=activity_type,
                                      start_date_from=start_date_from, start_date_to=start_date_to,
                                      has_power_data=has_power_data, trainer=trainer, source=source, sort_by=sort_by,
                                      sort_order=sort_order, )


@router.post("", summary="Store a recorded activity.", response_model=ActivityResponse,
             status_code=status.HTTP_201_CREATED, )
def create_activity(data: ActivityCreate, db: Session = Depends(get_db)):
    return ActivityService(db).create(data)


@router.get("/{activity_id}", summary="Get one activity.", response_model=ActivityResponse, )
def get_activity(activity_id: int, db: Session = Depends(get_db)):
    return ActivityService(db).get_by_id(activity_id)
