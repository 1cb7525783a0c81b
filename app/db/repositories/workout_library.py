"""
Workout library repository.

Handles database operations for :class:`WorkoutLibrary` templates and
their :class:`WorkoutSegment` rows.
"""

from typing import Optional

from sqlalchemy import func, or_
from sqlmodel import Session, select

from app.models.workout_library import WorkoutLibrary, WorkoutSegment


class WorkoutLibraryRepository:
    """Repository for workout template database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, template: WorkoutLibrary, segments: list[WorkoutSegment]) -> WorkoutLibrary:
        """Insert a template and its segments in one transaction."""
        self.session.add(template)
        self.session.flush()
        for segment in segments:
            segment.workout_library_id = template.id
            self.session.add(segment)
        self.session.commit()
        self.session.refresh(template)
        return template

    def get_by_id(self, template_id: int, include_inactive: bool = False) -> Optional[WorkoutLibrary]:
        template = self.session.get(WorkoutLibrary, template_id)
        if template is None or (not template.is_active and not include_inactive):
            return None
        return template

    def get_segments(self, template_id: int) -> list[WorkoutSegment]:
        statement = (select(WorkoutSegment).where(WorkoutSegment.workout_library_id == template_id).order_by(
            WorkoutSegment.segment_order))
        return list(self.session.exec(statement).all())

    def count_segments(self, template_ids: list[int]) -> dict[int, int]:
        """Segment count per template id."""
        if not template_ids:
            return {}
        statement = (select(WorkoutSegment.workout_library_id, func.count()).where(
            WorkoutSegment.workout_library_id.in_(template_ids)).group_by(WorkoutSegment.workout_library_id))
        return {template_id: count for template_id, count in self.session.exec(statement).all()}

    def search(self, *, training_type: Optional[str] = None, difficulty_level: Optional[int] = None,
               min_duration: Optional[int] = None, max_duration: Optional[int] = None,
               search: Optional[str] = None, is_public: Optional[bool] = None, skip: int = 0,
               limit: int = 20, ) -> tuple[list[WorkoutLibrary], int]:
        """Filtered, paginated listing of active templates.  Returns ``(page, total)``."""
        statement = select(WorkoutLibrary).where(WorkoutLibrary.is_active == True)  # noqa: E712
        if training_type:
            statement = statement.where(WorkoutLibrary.training_type == training_type)
        if difficulty_level is not None:
            statement = statement.where(WorkoutLibrary.difficulty_level == difficulty_level)
        if min_duration is not None:
            statement = statement.where(WorkoutLibrary.estimated_duration_minutes >= min_duration)
        if max_duration is not None:
            statement = statement.where(WorkoutLibrary.estimated_duration_minutes <= max_duration)
        if search:
            pattern = f"%{search}%"
            statement = statement.where(
                or_(WorkoutLibrary.name.ilike(pattern), WorkoutLibrary.description.ilike(pattern)))
        if is_public is not None:
            statement = statement.where(WorkoutLibrary.is_public == is_public)

        total = self.session.exec(select(func.count()).select_from(statement.subquery())).one()
        statement = statement.order_by(WorkoutLibrary.created_at.desc(), WorkoutLibrary.id.desc())
        statement = statement.offset(skip).limit(limit)
        return list(self.session.exec(statement).all()), total
