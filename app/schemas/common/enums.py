"""
Schema-facing enums. These are the model enums; values are the wire strings.
"""

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
    "AttendanceStatus",
    "ComplaintCategory",
    "InvoiceStatus",
    "SuggestionCategory",
    "TicketStatus",
    "UserRole",
    "UserStatus",
    "Weekday",
]
