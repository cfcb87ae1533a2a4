from app.repositories.attendance.attendance_repository import AttendanceRepository

__all__ = ["AttendanceRepository"]
