"""
User repository.

Athletes and coaches live in the same table and are told apart by
``role``.  The calendar joins both sides of an assignment against it.
"""

from typing import Optional

from sqlalchemy import or_
from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for athlete and coach rows."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def get_all(self, skip: int = 0, limit: int = 100, role: Optional[str] = None) -> list[User]:
        """
        Users ordered by username.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            role: ``athlete`` or ``coach``; both when omitted
        """
        statement = select(User)
        if role:
            statement = statement.where(User.role == role)
        statement = statement.order_by(User.username).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def exists_by_email_or_username(self, email: str, username: str) -> bool:
        """Whether either identifier is already registered."""
        statement = select(User.id).where(or_(User.email == email, User.username == username))
        return self.session.exec(statement).first() is not None
