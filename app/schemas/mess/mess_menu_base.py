# --- File: app/schemas/mess/mess_menu_base.py ---
"""
Mess menu and feedback schemas.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AliasChoices, Field

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema
from app.schemas.common.enums import Weekday
from app.schemas.common.response import StudentSummary

__all__ = [
    "MenuDayUpdate",
    "MenuDayEntry",
    "MessMenuResponse",
    "FeedbackCreate",
    "FeedbackResponse",
]


class MenuDayUpdate(BaseCreateSchema):
    """Full replacement of one day's meals."""

    breakfast: str = Field(..., min_length=1)
    lunch: str = Field(..., min_length=1)
    dinner: str = Field(..., min_length=1)
    special_menu: Optional[bool] = None
    notes: Optional[str] = None


class MenuDayEntry(MenuDayUpdate):
    day: Weekday


class MessMenuResponse(BaseResponseSchema):
    day: Weekday
    breakfast: str
    lunch: str
    dinner: str
    special_menu: bool = False
    notes: Optional[str] = None


class FeedbackCreate(BaseCreateSchema):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    feedback: str = Field(..., min_length=1, max_length=2000)


class FeedbackResponse(BaseResponseSchema):
    student_id: str
    student: Optional[StudentSummary] = None
    rating: Optional[int] = None
    feedback: str
    feedback_date: date = Field(
        ...,
        validation_alias=AliasChoices("feedback_date", "date"),
        serialization_alias="date",
    )
