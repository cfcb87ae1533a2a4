# --- File: app/schemas/attendance/attendance_base.py ---
"""
Attendance marking schemas.
"""

from __future__ import annotations

from datetime import date, time
from typing import List, Optional

from pydantic import AliasChoices, Field, model_validator

from app.schemas.common.base import BaseCreateSchema
from app.schemas.common.enums import AttendanceStatus

__all__ = [
    "AttendanceEntry",
    "AttendanceMark",
    "BulkAttendanceMark",
]


class AttendanceEntry(BaseCreateSchema):
    """One student's status for a day; the day comes from the enclosing request."""

    student_id: str = Field(..., min_length=1)
    status: AttendanceStatus
    time_in: Optional[time] = None
    time_out: Optional[time] = None
    remarks: Optional[str] = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def check_times(self) -> "AttendanceEntry":
        if self.time_in and self.time_out and self.time_out < self.time_in:
            raise ValueError("timeOut cannot be earlier than timeIn")
        return self


class AttendanceMark(AttendanceEntry):
    attendance_date: date = Field(
        ...,
        validation_alias=AliasChoices("date", "attendanceDate", "attendance_date"),
        serialization_alias="date",
    )


class BulkAttendanceMark(BaseCreateSchema):
    attendance_date: date = Field(
        ...,
        validation_alias=AliasChoices("date", "attendanceDate", "attendance_date"),
        serialization_alias="date",
    )
    records: List[AttendanceEntry] = Field(..., min_length=1)

    @model_validator(mode="after")
    def unique_students(self) -> "BulkAttendanceMark":
        seen = set()
        for entry in self.records:
            if entry.student_id in seen:
                raise ValueError(f"Student {entry.student_id} appears more than once")
            seen.add(entry.student_id)
        return self
