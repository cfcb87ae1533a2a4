"""
Warden profile model.

A warden supervises every student whose hostel block matches theirs.
"""
from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel
from app.models.user.user import User


class WardenProfile(TimestampModel):
    __tablename__ = "warden_profiles"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    hostel_block: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    contact_number: Mapped[str] = mapped_column(String(20), nullable=False)

    user: Mapped[User] = relationship(
        User,
        back_populates="warden_profile",
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
