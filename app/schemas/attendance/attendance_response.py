# --- File: app/schemas/attendance/attendance_response.py ---
"""
Attendance response and statistics schemas.
"""

from __future__ import annotations

from datetime import date, time
from typing import Optional

from pydantic import AliasChoices, Field

from app.schemas.common.base import BaseResponseSchema, BaseSchema
from app.schemas.common.enums import AttendanceStatus
from app.schemas.common.response import StudentSummary, UserSummary

__all__ = [
    "AttendanceResponse",
    "BulkMarkResponse",
    "AttendanceStats",
    "StudentAttendanceSummary",
]


class AttendanceResponse(BaseResponseSchema):
    student_id: str
    student: Optional[StudentSummary] = None
    attendance_date: date = Field(
        ...,
        validation_alias=AliasChoices("attendance_date", "date"),
        serialization_alias="date",
    )
    status: AttendanceStatus
    time_in: Optional[time] = None
    time_out: Optional[time] = None
    remarks: Optional[str] = None
    marked_by: Optional[UserSummary] = None


class BulkMarkResponse(BaseSchema):
    message: str
    count: int


class AttendanceStats(BaseSchema):
    average_attendance: float
    low_attendance_count: int
    perfect_attendance_count: int
    total_students: int
    month: Optional[int] = None
    year: Optional[int] = None


class StudentAttendanceSummary(BaseSchema):
    student_id: str
    present: int = 0
    absent: int = 0
    late: int = 0
    weekend: int = 0
    holiday: int = 0
    percentage: Optional[float] = None
