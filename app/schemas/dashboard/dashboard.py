"""
Dashboard statistics schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from app.schemas.common.base import BaseSchema
from app.schemas.student.student_base import StudentResponse

__all__ = [
    "ActivityItem",
    "AdminDashboard",
    "WardenDashboard",
    "StudentDashboard",
]


class ActivityItem(BaseSchema):
    """One entry of the recent activity feed."""

    id: str
    kind: str
    title: str
    status: str
    student_name: Optional[str] = None
    created_at: datetime


class AdminDashboard(BaseSchema):
    total_students: int
    total_wardens: int
    pending_complaints: int
    open_suggestions: int
    unpaid_invoices: int
    recent_activity: List[ActivityItem] = []


class WardenDashboard(BaseSchema):
    hostel_block: str
    total_students: int
    pending_complaints: int
    open_suggestions: int
    recent_activity: List[ActivityItem] = []


class StudentDashboard(BaseSchema):
    profile: StudentResponse
    pending_complaints: int
    unpaid_invoices: int
    attendance_percentage: Optional[float] = None
    recent_activity: List[ActivityItem] = []
