"""
Workout assignment repository.

Handles database operations for :class:`WorkoutAssignment`.  Read queries
return the assignment joined with its template and the two users
(athlete and coach), which is the shape the calendar consumes.
"""

import datetime
from typing import NamedTuple, Optional

from sqlalchemy import func
from sqlalchemy.orm import aliased
from sqlmodel import Session, select

from app.models.user import User
from app.models.workout_assignment import WorkoutAssignment
from app.models.workout_library import WorkoutLibrary

Athlete = aliased(User, name="athlete")
Coach = aliased(User, name="coach")


class AssignmentRow(NamedTuple):
    """An assignment with its joined template, athlete and coach."""

    assignment: WorkoutAssignment
    workout: WorkoutLibrary
    athlete: User
    coach: User


class WorkoutAssignmentRepository:
    """Repository for WorkoutAssignment database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutAssignment) -> WorkoutAssignment:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, assignment_id: int) -> Optional[WorkoutAssignment]:
        return self.session.get(WorkoutAssignment, assignment_id)

    def get_row(self, assignment_id: int) -> Optional[AssignmentRow]:
        statement = self._joined().where(WorkoutAssignment.id == assignment_id)
        row = self.session.exec(statement).first()
        return AssignmentRow(*row) if row else None

    # ------------------------------------------------------------------
    # Joined read queries
    # ------------------------------------------------------------------

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[AssignmentRow]:
        """Assignments of ``user_id`` scheduled within ``[start, end]`` inclusive."""
        statement = (self._joined().where(WorkoutAssignment.assigned_to_user_id == user_id,
                                          WorkoutAssignment.scheduled_date >= start,
                                          WorkoutAssignment.scheduled_date <= end, ).order_by(
            WorkoutAssignment.scheduled_date, WorkoutAssignment.created_at, WorkoutAssignment.id))
        return [AssignmentRow(*row) for row in self.session.exec(statement).all()]

    def search(self, *, assigned_to_user_id: Optional[int] = None, assigned_by_user_id: Optional[int] = None,
               status: Optional[str] = None, priority: Optional[str] = None, training_type: Optional[str] = None,
               scheduled_date_from: Optional[datetime.date] = None,
               scheduled_date_to: Optional[datetime.date] = None, skip: int = 0,
               limit: int = 20, ) -> tuple[list[AssignmentRow], int]:
        """Filtered, paginated listing, newest scheduled date first.  Returns ``(page, total)``."""
        statement = self._joined()
        if assigned_to_user_id is not None:
            statement = statement.where(WorkoutAssignment.assigned_to_user_id == assigned_to_user_id)
        if assigned_by_user_id is not None:
            statement = statement.where(WorkoutAssignment.assigned_by_user_id == assigned_by_user_id)
        if status:
            statement = statement.where(WorkoutAssignment.status == status)
        if priority:
            statement = statement.where(WorkoutAssignment.priority == priority)
        if training_type:
            statement = statement.where(WorkoutLibrary.training_type == training_type)
        if scheduled_date_from is not None:
            statement = statement.where(WorkoutAssignment.scheduled_date >= scheduled_date_from)
        if scheduled_date_to is not None:
            statement = statement.where(WorkoutAssignment.scheduled_date <= scheduled_date_to)

        total = self.session.exec(select(func.count()).select_from(statement.subquery())).one()
        statement = statement.order_by(WorkoutAssignment.scheduled_date.desc(), WorkoutAssignment.created_at.desc(),
                                       WorkoutAssignment.id.desc()).offset(skip).limit(limit)
        return [AssignmentRow(*row) for row in self.session.exec(statement).all()], total

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: WorkoutAssignment) -> WorkoutAssignment:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, assignment_id: int) -> bool:
        entry = self.get_by_id(assignment_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _joined():
        return (select(WorkoutAssignment, WorkoutLibrary, Athlete, Coach)
                .join(WorkoutLibrary, WorkoutAssignment.workout_library_id == WorkoutLibrary.id)
                .join(Athlete, WorkoutAssignment.assigned_to_user_id == Athlete.id)
                .join(Coach, WorkoutAssignment.assigned_by_user_id == Coach.id))
