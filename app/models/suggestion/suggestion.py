"""
Suggestion model with its comment thread.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import BaseModel, TimestampModel, enum_column, utcnow
from app.models.base.enums import SuggestionCategory, TicketStatus
from app.models.student.student_profile import StudentProfile
from app.models.user.user import User

__all__ = ["Suggestion", "SuggestionComment"]


class SuggestionComment(BaseModel):
    __tablename__ = "suggestion_comments"

    suggestion_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("suggestions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    user: Mapped[User] = relationship(User, lazy="selectin")

    @property
    def user_name(self) -> Optional[str]:
        return self.user.name if self.user else None

    @property
    def user_role(self):
        return self.user.role if self.user else None


class Suggestion(TimestampModel):
    __tablename__ = "suggestions"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("student_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[SuggestionCategory] = mapped_column(
        enum_column(SuggestionCategory),
        nullable=False,
        default=SuggestionCategory.OTHER,
    )
    status: Mapped[TicketStatus] = mapped_column(
        enum_column(TicketStatus),
        nullable=False,
        default=TicketStatus.PENDING,
        index=True,
    )
    response: Mapped[Optional[str]] = mapped_column(Text)
    responded_by_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
    )
    responded_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    student: Mapped[StudentProfile] = relationship(StudentProfile, lazy="selectin")
    responded_by: Mapped[Optional[User]] = relationship(User, lazy="selectin")
    comments: Mapped[List[SuggestionComment]] = relationship(
        SuggestionComment,
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by=SuggestionComment.created_at,
    )
