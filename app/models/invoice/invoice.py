"""
Hostel invoice.

Only Pending and Paid are ever stored. Overdue is reported for a pending
invoice whose due date has passed.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Date, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base.base_model import TimestampModel, enum_column
from app.models.base.enums import InvoiceStatus
from app.models.student.student_profile import StudentProfile

__all__ = ["Invoice"]


class Invoice(TimestampModel):
    __tablename__ = "invoices"

    invoice_number: Mapped[str] = mapped_column(String(30), unique=True, nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("student_profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    items: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[InvoiceStatus] = mapped_column(
        enum_column(InvoiceStatus),
        nullable=False,
        default=InvoiceStatus.PENDING,
        index=True,
    )
    paid_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    payment_method: Mapped[Optional[str]] = mapped_column(String(50))
    transaction_id: Mapped[Optional[str]] = mapped_column(String(100))

    student: Mapped[StudentProfile] = relationship(StudentProfile, lazy="selectin")

    def effective_status(self, today: Optional[date] = None) -> InvoiceStatus:
        today = today or date.today()
        if self.status == InvoiceStatus.PENDING and self.due_date < today:
            return InvoiceStatus.OVERDUE
        return self.status

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID
