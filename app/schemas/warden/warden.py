"""
Warden request and response schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema, reject_null
from app.schemas.common.enums import UserStatus

__all__ = ["WardenCreate", "WardenUpdate", "WardenResponse"]


class WardenCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    hostel_block: str = Field(..., min_length=1, max_length=50)
    contact_number: str = Field(..., min_length=1, max_length=20)
    status: UserStatus = UserStatus.ACTIVE


class WardenUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    hostel_block: Optional[str] = Field(default=None, min_length=1, max_length=50)
    contact_number: Optional[str] = Field(default=None, min_length=1, max_length=20)
    status: Optional[UserStatus] = None

    @field_validator("name", "email", "password", "hostel_block", "contact_number", "status")
    @classmethod
    def reject_null_values(cls, value):
        return reject_null(value)


class WardenResponse(BaseResponseSchema):
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[UserStatus] = None
    hostel_block: str
    contact_number: str
