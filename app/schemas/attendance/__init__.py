from app.schemas.attendance.attendance_base import AttendanceEntry, AttendanceMark, BulkAttendanceMark
from app.schemas.attendance.attendance_response import (
    AttendanceResponse,
    AttendanceStats,
    BulkMarkResponse,
    StudentAttendanceSummary,
)

__all__ = [
    "AttendanceEntry",
    "AttendanceMark",
    "AttendanceResponse",
    "AttendanceStats",
    "BulkAttendanceMark",
    "BulkMarkResponse",
    "StudentAttendanceSummary",
]
