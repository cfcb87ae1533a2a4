"""
Invoice use-cases.

Pending -> Paid is the only stored transition and Paid is final. Overdue is
never written; it is reported for pending invoices past their due date.
"""

from datetime import date, datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.models.base.enums import InvoiceStatus, UserRole
from app.models.invoice.invoice import Invoice
from app.repositories.invoice import InvoiceRepository
from app.repositories.student import StudentRepository
from app.schemas.invoice import InvoiceCreate, InvoicePayment, InvoiceStatusUpdate
from app.services.base import BaseService
from app.services.common import workflow
from app.services.common.errors import AlreadyPaidError, NotFoundError
from app.services.common.permissions import (
    Action,
    Principal,
    ResourceKind,
    ensure_in_scope,
    require_role,
    scope,
)


class InvoiceService(BaseService[InvoiceRepository]):
    resource_type = "Invoice"

    def __init__(self, session: AsyncSession):
        super().__init__(InvoiceRepository(session), session)
        self._students = StudentRepository(session)

    async def list_invoices(
        self,
        principal: Principal,
        status: Optional[InvoiceStatus] = None,
    ) -> List[Invoice]:
        record_scope = scope(principal, ResourceKind.INVOICE, Action.READ)
        return await self.repository.search(record_scope, status=status)

    async def student_invoices(self, principal: Principal, student_id: str) -> List[Invoice]:
        record_scope = scope(principal, ResourceKind.INVOICE, Action.READ)
        student = await self._students.get_by_id(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)
        ensure_in_scope(principal, record_scope, student, resource_type=self.resource_type)
        return await self.repository.search(record_scope, student_id=student_id)

    async def get_invoice(self, principal: Principal, invoice_id: str) -> Invoice:
        record_scope = scope(principal, ResourceKind.INVOICE, Action.READ)
        return await self._get_in_scope(invoice_id, principal, record_scope)

    async def create_invoice(self, principal: Principal, payload: InvoiceCreate) -> Invoice:
        require_role(principal, workflow.HANDLER_ROLES, error_message="Only wardens and admins can issue invoices")
        record_scope = scope(principal, ResourceKind.INVOICE, Action.WRITE)
        student = await self._students.get_by_id(payload.student_id)
        if student is None:
            raise NotFoundError("Student", payload.student_id)
        ensure_in_scope(principal, record_scope, student, resource_type=self.resource_type)

        amount = payload.amount if payload.amount is not None else payload.items_total
        if payload.items and payload.amount is not None and round(payload.amount, 2) != payload.items_total:
            self._logger.warning(
                "Invoice amount differs from the sum of its items",
                extra={"amount": payload.amount, "items_total": payload.items_total, "student_id": student.id},
            )

        issue_date = payload.issue_date or date.today()
        invoice = await self.repository.add(
            Invoice(
                invoice_number=await self.repository.next_invoice_number(
                    settings.INVOICE_NUMBER_PREFIX, issue_date.year
                ),
                student_id=student.id,
                amount=amount,
                items=[item.model_dump() for item in payload.items],
                issue_date=issue_date,
                due_date=payload.due_date,
                status=InvoiceStatus.PENDING,
            )
        )
        await self._commit()
        self._logger.info(
            "Invoice issued",
            extra={"invoice_number": invoice.invoice_number, "student_id": student.id, "amount": amount},
        )
        return await self._reload(invoice.id)

    async def update_status(self, principal: Principal, invoice_id: str, payload: InvoiceStatusUpdate) -> Invoice:
        require_role(principal, workflow.HANDLER_ROLES, error_message="Only wardens and admins can update invoices")
        record_scope = scope(principal, ResourceKind.INVOICE, Action.WRITE)
        invoice = await self._get_in_scope(invoice_id, principal, record_scope)
        if invoice.is_paid:
            raise AlreadyPaidError(invoice.invoice_number)

        if payload.status == InvoiceStatus.PAID:
            self._mark_paid(invoice, payload.payment_method, payload.transaction_id)
        await self._commit()
        return await self._reload(invoice_id)

    async def pay(self, principal: Principal, invoice_id: str, payment: InvoicePayment) -> Invoice:
        """
        Raises:
            AlreadyPaidError: If the invoice is already paid; nothing changes
        """
        require_role(principal, [UserRole.STUDENT], error_message="Only the billed student can pay an invoice")
        record_scope = scope(principal, ResourceKind.INVOICE, Action.WRITE)
        invoice = await self._get_in_scope(invoice_id, principal, record_scope)
        if invoice.is_paid:
            raise AlreadyPaidError(invoice.invoice_number)

        self._mark_paid(invoice, payment.payment_method, payment.transaction_id)
        await self._commit()
        self._logger.info(
            "Invoice paid",
            extra={"invoice_number": invoice.invoice_number, "payment_method": invoice.payment_method},
        )
        return await self._reload(invoice_id)

    @staticmethod
    def _mark_paid(invoice: Invoice, payment_method: Optional[str], transaction_id: Optional[str]) -> None:
        invoice.status = InvoiceStatus.PAID
        invoice.paid_date = datetime.now(timezone.utc)
        invoice.payment_method = payment_method or settings.DEFAULT_PAYMENT_METHOD
        invoice.transaction_id = transaction_id or f"TXN-{uuid4().hex[:12].upper()}"
