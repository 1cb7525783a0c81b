"""
User service.

Registration and lookup of athletes and coaches.  Authentication is
handled outside this service.
"""

from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate


class UserService:
    """Service for athlete and coach business logic."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def create(self, user_data: UserCreate) -> User:
        """
        Register an athlete or coach.

        Raises:
            HTTPException: 400 if the email or username is already taken
        """
        if self.repository.exists_by_email_or_username(user_data.email, user_data.username):
            logger.warning(f"Rejected duplicate registration for {user_data.username}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = User(**user_data.model_dump(exclude={"role"}), role=user_data.role.value)
        user = self.repository.create(user)
        logger.info(f"Created {user.role} {user.username} (id={user.id})")
        return user

    def get(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    def list(self, skip: int = 0, limit: int = 100, role: Optional[str] = None) -> list[User]:
        return self.repository.get_all(skip=skip, limit=limit, role=role)
