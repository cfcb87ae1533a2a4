"""
Database enums shared by models and schemas.

Member values are the exact strings exchanged on the wire.
"""

import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    STUDENT = "student"
    WARDEN = "warden"
    ADMIN = "admin"


class UserStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class TicketStatus(str, enum.Enum):
    """Lifecycle shared by complaints and suggestions."""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self in (TicketStatus.RESOLVED, TicketStatus.REJECTED)


class ComplaintCategory(str, enum.Enum):
    HOUSEKEEPING = "Housekeeping"
    INTERNET = "Internet"
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    FURNITURE = "Furniture"
    SECURITY = "Security"
    MESS = "Mess"
    OTHER = "Other"


class SuggestionCategory(str, enum.Enum):
    FACILITIES = "Facilities"
    MESS = "Mess"
    SECURITY = "Security"
    CLEANLINESS = "Cleanliness"
    ACTIVITIES = "Activities"
    OTHER = "Other"


class AttendanceStatus(str, enum.Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    WEEKEND = "Weekend"
    HOLIDAY = "Holiday"

    @property
    def is_countable(self) -> bool:
        """Weekend and Holiday days do not count towards the percentage."""
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE)

    @property
    def is_attended(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


class InvoiceStatus(str, enum.Enum):
    """Stored invoice states; OVERDUE is only ever derived on read."""
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


class Weekday(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def order(self) -> int:
        return list(Weekday).index(self)
