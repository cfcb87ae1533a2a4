# --- File: app/schemas/complaint/complaint_base.py ---
"""
Complaint request and response schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema
from app.schemas.common.enums import ComplaintCategory, TicketStatus
from app.schemas.common.response import StudentSummary, UserSummary

__all__ = [
    "ComplaintCreate",
    "ComplaintStatusUpdate",
    "ComplaintResolve",
    "ComplaintResponse",
]


class ComplaintCreate(BaseCreateSchema):
    """The owner is always the calling student and cannot be supplied."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: ComplaintCategory = ComplaintCategory.OTHER


class ComplaintStatusUpdate(BaseCreateSchema):
    status: TicketStatus
    resolution: Optional[str] = None

    @model_validator(mode="after")
    def resolution_required_to_resolve(self) -> "ComplaintStatusUpdate":
        if self.status == TicketStatus.RESOLVED and not self.resolution:
            raise ValueError("A resolution is required to resolve a complaint")
        return self


class ComplaintResolve(BaseCreateSchema):
    resolution: str = Field(..., min_length=1)


class ComplaintResponse(BaseResponseSchema):
    student_id: str
    student: Optional[StudentSummary] = None
    title: str
    description: str
    category: ComplaintCategory
    status: TicketStatus
    resolution: Optional[str] = None
    responded_by: Optional[UserSummary] = None
    responded_at: Optional[datetime] = None
