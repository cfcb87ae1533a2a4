# --- File: app/schemas/common/response.py ---
"""
Shared response shapes: acknowledgements, counts, errors and brief
embedded views of users and students.
"""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from app.schemas.common.base import BaseSchema
from app.schemas.common.enums import UserRole

__all__ = [
    "MessageResponse",
    "CountResponse",
    "ErrorDetail",
    "ErrorResponse",
    "UserSummary",
    "StudentSummary",
]


class MessageResponse(BaseSchema):
    """Simple acknowledgement."""

    message: str = Field(..., description="Response message")


class CountResponse(BaseSchema):
    count: int


class ErrorDetail(BaseSchema):
    """Error detail information."""

    field: Optional[str] = Field(default=None, description="Field name causing error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseSchema):
    """Error body. Extra keys carry error-specific context."""

    model_config = ConfigDict(extra="allow")

    message: str
    errors: Optional[List[ErrorDetail]] = None
    details: Optional[Dict[str, Any]] = None


class UserSummary(BaseSchema):
    id: str
    name: str
    role: UserRole


class StudentSummary(BaseSchema):
    """Owner view embedded in student-owned resources."""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    roll_number: Optional[str] = None
    hostel_block: Optional[str] = None
    room_number: Optional[str] = None
