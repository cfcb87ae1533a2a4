"""
Invoice repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import Integer, and_, cast, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import InvoiceStatus
from app.models.invoice.invoice import Invoice
from app.repositories.base.base_repository import OwnedRepository
from app.services.common.permissions import Scope


class InvoiceRepository(OwnedRepository[Invoice]):
    """Repository for invoices."""

    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)

    @staticmethod
    def status_criterion(status: InvoiceStatus, today: date):
        """SQL form of the reported status, with Overdue derived from the due date."""
        overdue = and_(Invoice.status == InvoiceStatus.PENDING, Invoice.due_date < today)
        if status == InvoiceStatus.OVERDUE:
            return overdue
        if status == InvoiceStatus.PENDING:
            return and_(Invoice.status == InvoiceStatus.PENDING, Invoice.due_date >= today)
        return Invoice.status == status

    async def search(
        self,
        scope: Scope,
        status: Optional[InvoiceStatus] = None,
        student_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[Invoice]:
        criteria = []
        if status is not None:
            criteria.append(self.status_criterion(status, today or date.today()))
        if student_id is not None:
            criteria.append(Invoice.student_id == student_id)
        return await self.list_scoped(scope, *criteria)

    async def count_unpaid(self, scope: Scope) -> int:
        return await self.count_scoped(scope, Invoice.status != InvoiceStatus.PAID)

    async def next_invoice_number(self, prefix: str, year: int) -> str:
        """``<prefix>-<year>-<NNNN>``, one past the highest number issued this year."""
        pattern = f"{prefix}-{year}-"
        # Compare the sequence numerically; as text "9999" sorts above "10000".
        sequence_part = cast(func.substr(Invoice.invoice_number, len(pattern) + 1), Integer)
        stmt = select(func.max(sequence_part)).where(Invoice.invoice_number.like(f"{pattern}%"))
        last = await self.session.scalar(stmt)
        sequence = int(last) + 1 if last else 1
        return f"{pattern}{sequence:04d}"
