"""
Suggestion request and response schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema
from app.schemas.common.enums import SuggestionCategory, TicketStatus, UserRole
from app.schemas.common.response import StudentSummary, UserSummary

__all__ = [
    "SuggestionCreate",
    "SuggestionStatusUpdate",
    "SuggestionRespond",
    "CommentCreate",
    "CommentResponse",
    "SuggestionResponse",
]


class SuggestionCreate(BaseCreateSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: SuggestionCategory = SuggestionCategory.OTHER


class SuggestionStatusUpdate(BaseCreateSchema):
    status: TicketStatus
    response: Optional[str] = None


class SuggestionRespond(BaseCreateSchema):
    response: str = Field(..., min_length=1)


class CommentCreate(BaseCreateSchema):
    text: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(BaseSchema):
    id: str
    user_id: str
    user_name: Optional[str] = None
    user_role: Optional[UserRole] = None
    text: str
    created_at: datetime


class SuggestionResponse(BaseResponseSchema):
    student_id: str
    student: Optional[StudentSummary] = None
    title: str
    description: str
    category: SuggestionCategory
    status: TicketStatus
    response: Optional[str] = None
    responded_by: Optional[UserSummary] = None
    responded_at: Optional[datetime] = None
    comments: List[CommentResponse] = []
