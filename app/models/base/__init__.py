"""
Base models package.

Provides the declarative base, abstract base classes and enums
for all database models.
"""

from app.models.base.base_model import Base, BaseModel, TimestampModel, enum_column, utcnow
from app.models.base.enums import (
    AttendanceStatus,
    ComplaintCategory,
    InvoiceStatus,
    SuggestionCategory,
    TicketStatus,
    UserRole,
    UserStatus,
    Weekday,
)

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "enum_column",
    "utcnow",
    "AttendanceStatus",
    "ComplaintCategory",
    "InvoiceStatus",
    "SuggestionCategory",
    "TicketStatus",
    "UserRole",
    "UserStatus",
    "Weekday",
]
