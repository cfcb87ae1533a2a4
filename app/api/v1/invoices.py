"""
Invoice endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import InvoiceStatus, UserRole
from app.schemas.invoice import InvoiceCreate, InvoicePayment, InvoiceResponse, InvoiceStatusUpdate
from app.services.common.permissions import Principal
from app.services.invoice import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])

issuers = require_roles(UserRole.ADMIN, UserRole.WARDEN)


def _many(invoices) -> List[InvoiceResponse]:
    return [InvoiceResponse.from_invoice(i) for i in invoices]


@router.get("", response_model=List[InvoiceResponse])
async def list_invoices(
    status_filter: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> List[InvoiceResponse]:
    """Filtering by Overdue selects pending invoices past their due date."""
    return _many(await InvoiceService(db).list_invoices(principal, status_filter))


@router.get("/my-invoices", response_model=List[InvoiceResponse])
async def list_my_invoices(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> List[InvoiceResponse]:
    return _many(await InvoiceService(db).list_invoices(principal))


@router.get("/student/{student_id}", response_model=List[InvoiceResponse])
async def list_student_invoices(
    student_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> List[InvoiceResponse]:
    return _many(await InvoiceService(db).student_invoices(principal, student_id))


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def read_invoice(
    invoice_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    return InvoiceResponse.from_invoice(await InvoiceService(db).get_invoice(principal, invoice_id))


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    payload: InvoiceCreate,
    principal: Principal = Depends(issuers),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    return InvoiceResponse.from_invoice(await InvoiceService(db).create_invoice(principal, payload))


@router.put("/{invoice_id}/status", response_model=InvoiceResponse)
async def update_invoice_status(
    invoice_id: str,
    payload: InvoiceStatusUpdate,
    principal: Principal = Depends(issuers),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    return InvoiceResponse.from_invoice(await InvoiceService(db).update_status(principal, invoice_id, payload))


@router.post("/{invoice_id}/pay", response_model=InvoiceResponse)
async def pay_invoice(
    invoice_id: str,
    payload: Optional[InvoicePayment] = None,
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Pay an own invoice. A paid invoice is left unchanged and the call fails."""
    invoice = await InvoiceService(db).pay(principal, invoice_id, payload or InvoicePayment())
    return InvoiceResponse.from_invoice(invoice)
