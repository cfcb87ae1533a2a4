"""
Daily attendance record.

Exactly one record exists per student per calendar day; marking the same
day again overwrites it.
"""
from datetime import date, time
from typing import Optional

from sqlalchemy import Date, ForeignKey, String, Text, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel, enum_column
from app.models.base.enums import AttendanceStatus
from app.models.student.student_profile import StudentProfile
from app.models.user.user import User

__all__ = ["AttendanceRecord"]


class AttendanceRecord(TimestampModel):
    __tablename__ = "attendance_records"
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("student_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attendance_date: Mapped[date] = mapped_column("date", Date, nullable=False, index=True)
    status: Mapped[AttendanceStatus] = mapped_column(
        enum_column(AttendanceStatus),
        nullable=False,
        default=AttendanceStatus.PRESENT,
    )
    time_in: Mapped[Optional[time]] = mapped_column(Time)
    time_out: Mapped[Optional[time]] = mapped_column(Time)
    remarks: Mapped[Optional[str]] = mapped_column(Text)
    marked_by_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
    )

    student: Mapped[StudentProfile] = relationship(StudentProfile, lazy="selectin")
    marked_by: Mapped[Optional[User]] = relationship(User, lazy="selectin")
