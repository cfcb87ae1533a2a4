"""
Invoice request and response schemas.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, model_validator

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema
from app.schemas.common.enums import InvoiceStatus
from app.schemas.common.response import StudentSummary

__all__ = [
    "InvoiceItem",
    "InvoiceCreate",
    "InvoiceStatusUpdate",
    "InvoicePayment",
    "InvoiceResponse",
]


class InvoiceItem(BaseSchema):
    description: str = Field(..., min_length=1, max_length=255)
    amount: float = Field(..., ge=0)


class InvoiceCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1)
    amount: Optional[float] = Field(default=None, gt=0, description="Defaults to the sum of items")
    items: List[InvoiceItem] = Field(default_factory=list)
    issue_date: Optional[date] = None
    due_date: date

    @model_validator(mode="after")
    def check_amount_and_dates(self) -> "InvoiceCreate":
        if self.amount is None and not self.items:
            raise ValueError("Either amount or items must be provided")
        if self.amount is None and sum(item.amount for item in self.items) <= 0:
            raise ValueError("Invoice total must be positive")
        if self.issue_date and self.due_date < self.issue_date:
            raise ValueError("dueDate cannot be before issueDate")
        return self

    @property
    def items_total(self) -> float:
        return round(sum(item.amount for item in self.items), 2)


class InvoiceStatusUpdate(BaseCreateSchema):
    """Only stored states can be set; Overdue is derived."""

    status: InvoiceStatus
    payment_method: Optional[str] = Field(default=None, max_length=50)
    transaction_id: Optional[str] = Field(default=None, max_length=100)

    @model_validator(mode="after")
    def reject_derived_status(self) -> "InvoiceStatusUpdate":
        if self.status == InvoiceStatus.OVERDUE:
            raise ValueError("Overdue is derived from the due date and cannot be set")
        return self


class InvoicePayment(BaseCreateSchema):
    payment_method: Optional[str] = Field(default=None, max_length=50)
    transaction_id: Optional[str] = Field(default=None, max_length=100)


class InvoiceResponse(BaseResponseSchema):
    invoice_number: str
    student_id: str
    student: Optional[StudentSummary] = None
    amount: float
    items: List[InvoiceItem] = []
    issue_date: date
    due_date: date
    status: InvoiceStatus
    paid_date: Optional[datetime] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None

    @classmethod
    def from_invoice(cls, invoice, today: Optional[date] = None) -> "InvoiceResponse":
        """Serialize with the reported status, which may be the derived Overdue."""
        response = cls.model_validate(invoice)
        response.status = invoice.effective_status(today)
        return response
