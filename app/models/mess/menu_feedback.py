"""
Student feedback on the mess.
"""
from datetime import date
from typing import Optional

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel
from app.models.student.student_profile import StudentProfile

__all__ = ["MessFeedback"]


class MessFeedback(TimestampModel):
    __tablename__ = "mess_feedback"
    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 5)", name="ck_mess_feedback_rating"),
    )

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("student_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    rating: Mapped[Optional[int]] = mapped_column(Integer)
    feedback: Mapped[str] = mapped_column(Text, nullable=False)
    feedback_date: Mapped[date] = mapped_column("date", Date, nullable=False, default=date.today)

    student: Mapped[StudentProfile] = relationship(StudentProfile, lazy="selectin")
