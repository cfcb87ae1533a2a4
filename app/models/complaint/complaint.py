"""
Complaint model.

A maintenance or service complaint raised by a student and handled by the
wardens of the student's block or by an admin.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel, enum_column
from app.models.base.enums import ComplaintCategory, TicketStatus
from app.models.student.student_profile import StudentProfile
from app.models.user.user import User

__all__ = ["Complaint"]


class Complaint(TimestampModel):
    """
    Attributes:
        student_id: Owning student profile
        category: Complaint category
        status: Ticket workflow state
        resolution: Handler's resolution note, required to resolve
        responded_by_id: User who moved the complaint into a terminal state
    """
    __tablename__ = "complaints"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("student_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[ComplaintCategory] = mapped_column(
        enum_column(ComplaintCategory),
        nullable=False,
        default=ComplaintCategory.OTHER,
    )
    status: Mapped[TicketStatus] = mapped_column(
        enum_column(TicketStatus),
        nullable=False,
        default=TicketStatus.PENDING,
        index=True,
    )
    resolution: Mapped[Optional[str]] = mapped_column(Text)
    responded_by_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
    )
    responded_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    student: Mapped[StudentProfile] = relationship(StudentProfile, lazy="selectin")
    responded_by: Mapped[Optional[User]] = relationship(User, lazy="selectin")
