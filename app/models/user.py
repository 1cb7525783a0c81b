"""
User database model.

Athletes and coaches share the ``users`` table; ``role`` tells them apart.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    User model.

    Stores profile information for athletes and coaches.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    username: str = Field(unique=True, index=True, max_length=100, nullable=False)

    # Profile
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    role: str = Field(default="athlete", max_length=20, nullable=False)
    ftp_watts: Optional[int] = Field(default=None)
    max_heart_rate: Optional[int] = Field(default=None)
    intervals_icu_id: Optional[str] = Field(default=None, max_length=50, index=True)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

