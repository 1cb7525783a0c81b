"""
Workout library endpoints.

Reusable workout templates and their segments.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.workout_library import (WorkoutTemplateCreate, WorkoutTemplateDetailResponse,
                                         WorkoutTemplateListResponse, )
from app.services.workout_library_service import WorkoutLibraryService

router = APIRouter()


@router.get("", summary="List workout templates.", response_model=WorkoutTemplateListResponse, )
def list_templates(training_type: Optional[str] = Query(None),
                   difficulty_level: Optional[int] = Query(None, ge=1, le=10),
                   min_duration: Optional[int] = Query(None, ge=0, description="Minutes"),
                   max_duration: Optional[int] = Query(None, ge=0, description="Minutes"),
                   search: Optional[str] = Query(None, description="Matches name or description"),
                   is_public: Optional[bool] = Query(None),
                   page: int = Query(1, ge=1), limit: int = Query(20, ge=1, le=100),
                   db: Session = Depends(get_db), ):
    return WorkoutLibraryService(db).search(page=page, limit=limit, training_type=training_type,
                                            difficulty_level=difficulty_level, min_duration=min_duration,
                                            max_duration=max_duration, search=search, is_public=is_public, )


@router.post("", summary="Create a workout template with its segments.", response_model=WorkoutTemplateDetailResponse,
             status_code=status.HTTP_201_CREATED, )
def create_template(data: WorkoutTemplateCreate, db: Session = Depends(get_db)):
    return WorkoutLibraryService(db).create(data)


@router.get("/{template_id}", summary="Get a workout template with its segments.",
            response_model=WorkoutTemplateDetailResponse, )
def get_template(template_id: int, db: Session = Depends(get_db)):
    return WorkoutLibraryService(db).get_by_id(template_id)
