from app.services.attendance.attendance_report_service import (
    attendance_percentage,
    compute_stats,
    month_bounds,
    summarize_by_student,
)
from app.services.attendance.attendance_service import AttendanceService

__all__ = [
    "AttendanceService",
    "attendance_percentage",
    "compute_stats",
    "month_bounds",
    "summarize_by_student",
]
