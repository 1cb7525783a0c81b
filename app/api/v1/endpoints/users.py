"""
User endpoints.

Athletes and coaches.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.models.enums import UserRole
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("", summary="Create a user.", response_model=UserResponse, status_code=status.HTTP_201_CREATED, )
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create(data)


@router.get("", summary="List users.", response_model=list[UserResponse], )
def list_users(role: Optional[UserRole] = Query(None, description="Only athletes or only coaches"),
               skip: int = Query(0, ge=0, description="Records to skip"),
               limit: int = Query(100, ge=1, le=500, description="Max records to return"),
               db: Session = Depends(get_db), ):
    return UserService(db).list(skip=skip, limit=limit, role=role.value if role else None)


@router.get("/{user_id}", summary="Get a user.", response_model=UserResponse, )
def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).get(user_id)
