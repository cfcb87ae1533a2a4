# models/__init__.py
from app.models.base import Base
from app.models.user import User
from app.models.student import StudentProfile
from app.models.warden import WardenProfile
from app.models.complaint import Complaint
from app.models.suggestion import Suggestion, SuggestionComment
from app.models.attendance import AttendanceRecord
from app.models.invoice import Invoice
from app.models.mess import MessFeedback, MessMenu

__all__ = [
    "Base",
    "User",
    "StudentProfile",
    "WardenProfile",
    "Complaint",
    "Suggestion",
    "SuggestionComment",
    "AttendanceRecord",
    "Invoice",
    "MessFeedback",
    "MessMenu",
]
