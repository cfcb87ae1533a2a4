# --- File: app/schemas/auth/login.py ---
"""
Login, registration and token schemas.
Pydantic v2 compliant.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.schemas.common.base import BaseCreateSchema, BaseSchema
from app.schemas.common.enums import UserRole, UserStatus
from app.schemas.student.student_base import StudentResponse
from app.schemas.warden.warden import WardenResponse

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "CurrentUserResponse",
    "TokenResponse",
]


class LoginRequest(BaseCreateSchema):
    """
    Email/password login.

    The claimed role is optional; when given and wrong, the response tells
    the client which role the account actually has.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, max_length=128)
    role: Optional[UserRole] = Field(default=None, description="Role the client is logging in as")

    @field_validator("email", mode="after")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class RegisterRequest(BaseCreateSchema):
    """Public self-registration. Only the student role is accepted."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: UserRole = UserRole.STUDENT

    @field_validator("email", mode="after")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserResponse(BaseSchema):
    id: str
    name: str
    email: str
    role: UserRole
    status: UserStatus
    created_at: Optional[datetime] = None


class CurrentUserResponse(UserResponse):
    student_profile: Optional[StudentResponse] = None
    warden_profile: Optional[WardenResponse] = None


class TokenResponse(BaseSchema):
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
