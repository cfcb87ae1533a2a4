"""
Weekly mess menu: one row per weekday, shared by the whole hostel.
"""
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base.base_model import TimestampModel, enum_column
from app.models.base.enums import Weekday

__all__ = ["MessMenu"]


class MessMenu(TimestampModel):
    __tablename__ = "mess_menus"

    day: Mapped[Weekday] = mapped_column(enum_column(Weekday, length=10), unique=True, nullable=False)
    breakfast: Mapped[str] = mapped_column(Text, nullable=False, default="")
    lunch: Mapped[str] = mapped_column(Text, nullable=False, default="")
    dinner: Mapped[str] = mapped_column(Text, nullable=False, default="")
    special_menu: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    updated_by_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
    )
