"""
User model configuration.
"""
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel, enum_column
from app.models.base.enums import UserRole, UserStatus

if TYPE_CHECKING:
    from app.models.student.student_profile import StudentProfile
    from app.models.warden.warden_profile import WardenProfile


class User(TimestampModel):
    """
    Core User entity.

    Holds credentials and the role used for access control. Students and
    wardens carry a one-to-one role profile; admins have none.
    """
    __tablename__ = "users"
    __table_args__ = (
        {"comment": "User authentication and identity"}
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Full name of the user",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique email address (normalized to lowercase)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )
    role: Mapped[UserRole] = mapped_column(
        enum_column(UserRole),
        nullable=False,
        default=UserRole.STUDENT,
        index=True,
    )
    status: Mapped[UserStatus] = mapped_column(
        enum_column(UserStatus),
        nullable=False,
        default=UserStatus.ACTIVE,
    )

    student_profile: Mapped[Optional["StudentProfile"]] = relationship(
        "StudentProfile",
        back_populates="user",
        uselist=False,
        lazy="selectin",
    )
    warden_profile: Mapped[Optional["WardenProfile"]] = relationship(
        "WardenProfile",
        back_populates="user",
        uselist=False,
        lazy="selectin",
    )

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @property
    def profile(self):
        if self.role == UserRole.STUDENT:
            return self.student_profile
        if self.role == UserRole.WARDEN:
            return self.warden_profile
        return None

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
