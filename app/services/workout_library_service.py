"""
Workout library service.

Creates workout templates with their segments and serves template
listings and details.
"""

from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.db.repositories.workout_library import WorkoutLibraryRepository
from app.models.workout_library import WorkoutLibrary, WorkoutSegment
from app.schemas.workout_library import (WorkoutSegmentResponse, WorkoutTemplateCreate, WorkoutTemplateDetailResponse,
                                         WorkoutTemplateListResponse, WorkoutTemplateResponse, )


class WorkoutLibraryService:
    """Service for workout template business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutLibraryRepository(session)
        self.users = UserRepository(session)

    def create(self, data: WorkoutTemplateCreate) -> WorkoutTemplateDetailResponse:
        if data.created_by is not None and not self.users.get_by_id(data.created_by):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Creator not found")

        template = WorkoutLibrary(**data.model_dump(exclude={"segments"}))
        segments = [WorkoutSegment(**s.model_dump(exclude={"segment_type"}), segment_type=s.segment_type.value)
                    for s in data.segments]
        template = self.repository.create(template, segments)
        logger.info(f"Created workout template '{template.name}' (id={template.id}, {len(segments)} segments)")
        return self.get_by_id(template.id)

    def get_by_id(self, template_id: int) -> WorkoutTemplateDetailResponse:
        template = self.repository.get_by_id(template_id)
        if not template:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout template not found")
        segments = self.repository.get_segments(template_id)
        return WorkoutTemplateDetailResponse(**self._to_response(template, len(segments)).model_dump(),
                                             segments=[WorkoutSegmentResponse.model_validate(s) for s in segments], )

    def search(self, *, page: int = 1, limit: int = 20, training_type: Optional[str] = None,
               difficulty_level: Optional[int] = None, min_duration: Optional[int] = None,
               max_duration: Optional[int] = None, search: Optional[str] = None,
               is_public: Optional[bool] = None, ) -> WorkoutTemplateListResponse:
        templates, total = self.repository.search(training_type=training_type, difficulty_level=difficulty_level,
                                                  min_duration=min_duration, max_duration=max_duration,
                                                  search=search, is_public=is_public, skip=(page - 1) * limit,
                                                  limit=limit, )
        counts = self.repository.count_segments([t.id for t in templates])
        return WorkoutTemplateListResponse(workouts=[self._to_response(t, counts.get(t.id, 0)) for t in templates],
                                           total=total, page=page, limit=limit, )

    @staticmethod
    def _to_response(template: WorkoutLibrary, segment_count: int) -> WorkoutTemplateResponse:
        return WorkoutTemplateResponse(id=template.id, name=template.name, description=template.description,
                                       training_type=template.training_type,
                                       primary_control_parameter=template.primary_control_parameter,
                                       secondary_control_parameter=template.secondary_control_parameter,
                                       estimated_duration_minutes=template.estimated_duration_minutes,
                                       difficulty_level=template.difficulty_level, tags=list(template.tags or []),
                                       is_public=template.is_public, is_active=template.is_active,
                                       created_by=template.created_by, segment_count=segment_count,
                                       created_at=template.created_at, updated_at=template.updated_at, )
