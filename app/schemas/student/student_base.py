# --- File: app/schemas/student/student_base.py ---
"""
Student request and response schemas.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema, reject_null
from app.schemas.common.enums import UserStatus

__all__ = [
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
]


class _StudentDetails(BaseCreateSchema):
    roll_number: Optional[str] = Field(default=None, max_length=50)
    course: Optional[str] = Field(default=None, max_length=100)
    year: Optional[int] = Field(default=None, ge=1, le=10)
    hostel_block: Optional[str] = Field(default=None, max_length=50)
    room_number: Optional[str] = Field(default=None, max_length=20)
    contact_number: Optional[str] = Field(default=None, max_length=20)
    parent_name: Optional[str] = Field(default=None, max_length=255)
    parent_contact: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    blood_group: Optional[str] = Field(default=None, max_length=5)


class StudentCreate(_StudentDetails):
    """Admin-side creation of a student account together with its profile."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    status: UserStatus = UserStatus.ACTIVE


class StudentUpdate(_StudentDetails, BaseUpdateSchema):
    """Partial update. Account fields live on the user, the rest on the profile."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    status: Optional[UserStatus] = None

    @field_validator("name", "email", "password", "status")
    @classmethod
    def reject_null_values(cls, value):
        return reject_null(value)


class StudentResponse(BaseResponseSchema):
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[UserStatus] = None
    roll_number: Optional[str] = None
    course: Optional[str] = None
    year: Optional[int] = None
    hostel_block: Optional[str] = None
    room_number: Optional[str] = None
    contact_number: Optional[str] = None
    parent_name: Optional[str] = None
    parent_contact: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[date] = None
    blood_group: Optional[str] = None
