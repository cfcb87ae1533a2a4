"""
Student profile model.

One-to-one extension of a student User with academic and hostel placement
details. The hostel block drives warden scoping.
"""
from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel
from app.models.user.user import User


class StudentProfile(TimestampModel):
    __tablename__ = "student_profiles"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    roll_number: Mapped[Optional[str]] = mapped_column(String(50), unique=True, nullable=True)
    course: Mapped[Optional[str]] = mapped_column(String(100))
    year: Mapped[Optional[int]] = mapped_column(Integer)
    hostel_block: Mapped[Optional[str]] = mapped_column(String(50), index=True)
    room_number: Mapped[Optional[str]] = mapped_column(String(20))
    contact_number: Mapped[Optional[str]] = mapped_column(String(20))
    parent_name: Mapped[Optional[str]] = mapped_column(String(255))
    parent_contact: Mapped[Optional[str]] = mapped_column(String(20))
    address: Mapped[Optional[str]] = mapped_column(Text)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date)
    blood_group: Mapped[Optional[str]] = mapped_column(String(5))

    user: Mapped[User] = relationship(
        User,
        back_populates="student_profile",
        lazy="selectin",
    )

    @property
    def name(self) -> Optional[str]:
        return self.user.name if self.user else None

    @property
    def email(self) -> Optional[str]:
        return self.user.email if self.user else None

    @property
    def status(self):
        return self.user.status if self.user else None
