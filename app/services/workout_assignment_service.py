"""
Workout assignment service.

Coaches schedule workout templates for athletes on calendar dates; the
assignment status then moves as the athlete trains.  Every mutation
returns the assignment so callers can invalidate the cached month it
belongs to.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.db.repositories.workout_assignment import AssignmentRow, WorkoutAssignmentRepository
from app.db.repositories.workout_library import WorkoutLibraryRepository
from app.models.enums import AssignmentStatus
from app.models.workout_assignment import WorkoutAssignment
from app.schemas.workout_assignment import (WorkoutAssignmentCreate, WorkoutAssignmentListResponse,
                                            WorkoutAssignmentResponse, WorkoutAssignmentStatusUpdate, )


class WorkoutAssignmentService:
    """Service for workout assignment business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutAssignmentRepository(session)
        self.templates = WorkoutLibraryRepository(session)
        self.users = UserRepository(session)

    def create(self, data: WorkoutAssignmentCreate) -> WorkoutAssignmentResponse:
        # 1. Template and both users must exist
        if not self.templates.get_by_id(data.workout_library_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout template not found")
        if not self.users.get_by_id(data.assigned_to_user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found")
        if not self.users.get_by_id(data.assigned_by_user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Coach not found")

        # 2. Store
        entry = WorkoutAssignment(workout_library_id=data.workout_library_id,
                                  assigned_to_user_id=data.assigned_to_user_id,
                                  assigned_by_user_id=data.assigned_by_user_id, scheduled_date=data.scheduled_date,
                                  priority=data.priority.value, intensity_adjustment=data.intensity_adjustment,
                                  duration_adjustment=data.duration_adjustment, custom_notes=data.custom_notes, )
        entry = self.repository.create(entry)
        logger.info(f"Assigned workout {entry.workout_library_id} to user {entry.assigned_to_user_id} "
                    f"on {entry.scheduled_date} (assignment {entry.id})")
        return self.get_by_id(entry.id)

    def get_by_id(self, assignment_id: int) -> WorkoutAssignmentResponse:
        row = self.repository.get_row(assignment_id)
        if not row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout assignment not found")
        return self._to_response(row)

    def get_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[WorkoutAssignmentResponse]:
        """Assignments of ``user_id`` scheduled within ``[start, end]`` inclusive."""
        rows = self.repository.get_by_user_date_range(user_id, start, end)
        return [self._to_response(r) for r in rows]

    def search(self, *, page: int = 1, limit: int = 20, **filters) -> WorkoutAssignmentListResponse:
        rows, total = self.repository.search(skip=(page - 1) * limit, limit=limit, **filters)
        return WorkoutAssignmentListResponse(assignments=[self._to_response(r) for r in rows], total=total, page=page,
                                             limit=limit, )

    def update_status(self, assignment_id: int, data: WorkoutAssignmentStatusUpdate) -> WorkoutAssignmentResponse:
        entry = self.repository.get_by_id(assignment_id)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout assignment not found")

        entry.status = data.status.value
        if data.status == AssignmentStatus.COMPLETED:
            entry.completed_at = data.completion_date or datetime.datetime.utcnow()
        else:
            entry.completed_at = None
        if data.completion_notes is not None:
            entry.athlete_feedback = data.completion_notes
        if data.coach_review is not None:
            entry.coach_review = data.coach_review
        entry.updated_at = datetime.datetime.utcnow()

        self.repository.update(entry)
        logger.info(f"Assignment {assignment_id} moved to {entry.status}")
        return self.get_by_id(assignment_id)

    def delete(self, assignment_id: int) -> WorkoutAssignmentResponse:
        """Delete an assignment and return what it was."""
        deleted = self.get_by_id(assignment_id)
        self.repository.delete(assignment_id)
        logger.info(f"Deleted assignment {assignment_id} ({deleted.workout_name} on {deleted.scheduled_date})")
        return deleted

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(row: AssignmentRow) -> WorkoutAssignmentResponse:
        entry, workout, athlete, coach = row
        return WorkoutAssignmentResponse(id=entry.id, workout_library_id=entry.workout_library_id,
                                         assigned_to_user_id=entry.assigned_to_user_id,
                                         assigned_by_user_id=entry.assigned_by_user_id,
                                         scheduled_date=entry.scheduled_date, status=entry.status,
                                         priority=entry.priority, intensity_adjustment=entry.intensity_adjustment,
                                         duration_adjustment=entry.duration_adjustment,
                                         custom_notes=entry.custom_notes, completed_at=entry.completed_at,
                                         athlete_feedback=entry.athlete_feedback, coach_review=entry.coach_review,
                                         created_at=entry.created_at, updated_at=entry.updated_at,
                                         workout_name=workout.name, workout_description=workout.description,
                                         workout_training_type=workout.training_type,
                                         workout_duration=workout.estimated_duration_minutes,
                                         workout_difficulty=workout.difficulty_level,
                                         athlete_username=athlete.username, athlete_first_name=athlete.first_name,
                                         athlete_last_name=athlete.last_name, coach_username=coach.username,
                                         coach_first_name=coach.first_name, coach_last_name=coach.last_name, )
