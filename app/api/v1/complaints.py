"""
Complaint endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import ComplaintCategory, TicketStatus, UserRole
from app.schemas.common import MessageResponse
from app.schemas.complaint import ComplaintCreate, ComplaintResolve, ComplaintResponse, ComplaintStatusUpdate
from app.services.common.permissions import Principal
from app.services.complaint import ComplaintService

router = APIRouter(prefix="/complaints", tags=["Complaints"])

handlers = require_roles(UserRole.WARDEN, UserRole.ADMIN)


def _many(complaints) -> List[ComplaintResponse]:
    return [ComplaintResponse.model_validate(c) for c in complaints]


@router.get("", response_model=List[ComplaintResponse])
async def list_complaints(
    status_filter: Optional[TicketStatus] = Query(default=None, alias="status"),
    category: Optional[ComplaintCategory] = None,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> List[ComplaintResponse]:
    """Complaints visible to the caller, newest first."""
    return _many(await ComplaintService(db).list_complaints(principal, status_filter, category))


@router.get("/my-complaints", response_model=List[ComplaintResponse])
async def list_my_complaints(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> List[ComplaintResponse]:
    return _many(await ComplaintService(db).list_complaints(principal))


@router.get("/warden", response_model=List[ComplaintResponse])
async def list_block_complaints(
    status_filter: Optional[TicketStatus] = Query(default=None, alias="status"),
    principal: Principal = Depends(require_roles(UserRole.WARDEN)),
    db: AsyncSession = Depends(get_db),
) -> List[ComplaintResponse]:
    return _many(await ComplaintService(db).list_complaints(principal, status_filter))


@router.get("/{complaint_id}", response_model=ComplaintResponse)
async def read_complaint(
    complaint_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> ComplaintResponse:
    return ComplaintResponse.model_validate(await ComplaintService(db).get_complaint(principal, complaint_id))


@router.post("", response_model=ComplaintResponse, status_code=status.HTTP_201_CREATED)
async def create_complaint(
    payload: ComplaintCreate,
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> ComplaintResponse:
    return ComplaintResponse.model_validate(await ComplaintService(db).create_complaint(principal, payload))


@router.put("/{complaint_id}/status", response_model=ComplaintResponse)
async def update_complaint_status(
    complaint_id: str,
    payload: ComplaintStatusUpdate,
    principal: Principal = Depends(handlers),
    db: AsyncSession = Depends(get_db),
) -> ComplaintResponse:
    complaint = await ComplaintService(db).update_status(
        principal, complaint_id, payload.status, payload.resolution
    )
    return ComplaintResponse.model_validate(complaint)


@router.put("/{complaint_id}/resolve", response_model=ComplaintResponse)
async def resolve_complaint(
    complaint_id: str,
    payload: ComplaintResolve,
    principal: Principal = Depends(handlers),
    db: AsyncSession = Depends(get_db),
) -> ComplaintResponse:
    complaint = await ComplaintService(db).resolve(principal, complaint_id, payload.resolution)
    return ComplaintResponse.model_validate(complaint)


@router.delete("/{complaint_id}", response_model=MessageResponse)
async def delete_complaint(
    complaint_id: str,
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Students may withdraw their own complaint while it is still Pending."""
    await ComplaintService(db).delete_complaint(principal, complaint_id)
    return MessageResponse(message="Complaint deleted successfully")
