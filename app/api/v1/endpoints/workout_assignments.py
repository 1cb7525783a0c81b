"""
Workout assignment endpoints.

Every mutation invalidates the cached monthly plan of the athlete and
month it touches.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_plan_cache
from app.db.session import get_db
from app.models.enums import AssignmentPriority, AssignmentStatus
from app.schedule.cache import MonthlyPlanCache
from app.schemas.workout_assignment import (DeleteResponse, WorkoutAssignmentCreate, WorkoutAssignmentListResponse,
                                            WorkoutAssignmentResponse, WorkoutAssignmentStatusUpdate, )
from app.services.workout_assignment_service import WorkoutAssignmentService

router = APIRouter()


def _invalidate(cache: MonthlyPlanCache, assignment: WorkoutAssignmentResponse) -> None:
    day = assignment.scheduled_date
    cache.invalidate(assignment.assigned_to_user_id, day.year, day.month)


@router.get("", summary="List workout assignments.", response_model=WorkoutAssignmentListResponse, )
def list_assignments(assigned_to_user_id: Optional[int] = Query(None, gt=0, description="Athlete"),
                     assigned_by_user_id: Optional[int] = Query(None, gt=0, description="Coach"),
                     status: Optional[AssignmentStatus] = Query(None),
                     priority: Optional[AssignmentPriority] = Query(None),
                     training_type: Optional[str] = Query(None),
                     scheduled_date_from: Optional[datetime.date] = Query(None, description="Inclusive"),
                     scheduled_date_to: Optional[datetime.date] = Query(None, description="Inclusive"),
                     page: int = Query(1, ge=1), limit: int = Query(20, ge=1, le=100),
                     db: Session = Depends(get_db), ):
    return WorkoutAssignmentService(db).search(page=page, limit=limit, assigned_to_user_id=assigned_to_user_id,
                                               assigned_by_user_id=assigned_by_user_id,
                                               status=status.value if status else None,
                                               priority=priority.value if priority else None,
                                               training_type=training_type, scheduled_date_from=scheduled_date_from,
                                               scheduled_date_to=scheduled_date_to, )


@router.post("", summary="Assign a workout to an athlete.", response_model=WorkoutAssignmentResponse,
             status_code=status.HTTP_201_CREATED, )
def create_assignment(data: WorkoutAssignmentCreate, db: Session = Depends(get_db),
                      cache: MonthlyPlanCache = Depends(get_plan_cache), ):
    assignment = WorkoutAssignmentService(db).create(data)
    _invalidate(cache, assignment)
    return assignment


@router.get("/{assignment_id}", summary="Get one workout assignment.", response_model=WorkoutAssignmentResponse, )
def get_assignment(assignment_id: int, db: Session = Depends(get_db)):
    return WorkoutAssignmentService(db).get_by_id(assignment_id)


@router.patch("/{assignment_id}/status", summary="Update an assignment's status.",
              response_model=WorkoutAssignmentResponse, )
def update_assignment_status(assignment_id: int, data: WorkoutAssignmentStatusUpdate, db: Session = Depends(get_db),
                             cache: MonthlyPlanCache = Depends(get_plan_cache), ):
    assignment = WorkoutAssignmentService(db).update_status(assignment_id, data)
    _invalidate(cache, assignment)
    return assignment


@router.delete("/{assignment_id}", summary="Delete a workout assignment.", response_model=DeleteResponse, )
def delete_assignment(assignment_id: int, db: Session = Depends(get_db),
                      cache: MonthlyPlanCache = Depends(get_plan_cache), ):
    assignment = WorkoutAssignmentService(db).delete(assignment_id)
    _invalidate(cache, assignment)
    return DeleteResponse(success=True, message="Workout assignment deleted successfully")
