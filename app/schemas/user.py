"""
User API schemas.

Athletes and coaches share one shape; ``role`` tells them apart.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.enums import UserRole


class UserBase(BaseModel):
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=100)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)


class UserCreate(UserBase):
    """Schema for registering an athlete or coach."""
    role: UserRole = UserRole.ATHLETE
    ftp_watts: Optional[int] = Field(None, ge=50, le=700, description="Functional threshold power")
    max_heart_rate: Optional[int] = Field(None, ge=100, le=230)
    intervals_icu_id: Optional[str] = Field(None, max_length=50, description="Athlete id at intervals.icu")


class UserResponse(UserBase):
    id: int
    role: str
    ftp_watts: Optional[int]
    max_heart_rate: Optional[int]
    intervals_icu_id: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
