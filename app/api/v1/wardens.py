"""
Warden endpoints. Wardens are managed by admins; a warden may read their own profile.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import UserRole
from app.schemas.common import MessageResponse
from app.schemas.warden import WardenCreate, WardenResponse, WardenUpdate
from app.services.common.permissions import Principal
from app.services.warden import WardenService

router = APIRouter(prefix="/wardens", tags=["Wardens"])

admin_only = require_roles(UserRole.ADMIN)


@router.get("", response_model=List[WardenResponse])
async def list_wardens(
    hostel_block: Optional[str] = Query(default=None, alias="hostelBlock"),
    principal: Principal = Depends(admin_only),
    db: AsyncSession = Depends(get_db),
) -> List[WardenResponse]:
    wardens = await WardenService(db).list_wardens(principal, hostel_block)
    return [WardenResponse.model_validate(w) for w in wardens]


@router.get("/me", response_model=WardenResponse)
async def read_own_profile(
    principal: Principal = Depends(require_roles(UserRole.WARDEN)),
    db: AsyncSession = Depends(get_db),
) -> WardenResponse:
    return WardenResponse.model_validate(await WardenService(db).get_own_profile(principal))


@router.get("/{warden_id}", response_model=WardenResponse)
async def read_warden(
    warden_id: str,
    principal: Principal = Depends(require_roles(UserRole.ADMIN, UserRole.WARDEN)),
    db: AsyncSession = Depends(get_db),
) -> WardenResponse:
    return WardenResponse.model_validate(await WardenService(db).get_warden(principal, warden_id))


@router.post("", response_model=WardenResponse, status_code=status.HTTP_201_CREATED)
async def create_warden(
    payload: WardenCreate,
    principal: Principal = Depends(admin_only),
    db: AsyncSession = Depends(get_db),
) -> WardenResponse:
    return WardenResponse.model_validate(await WardenService(db).create_warden(principal, payload))


@router.put("/{warden_id}", response_model=WardenResponse)
async def update_warden(
    warden_id: str,
    payload: WardenUpdate,
    principal: Principal = Depends(admin_only),
    db: AsyncSession = Depends(get_db),
) -> WardenResponse:
    return WardenResponse.model_validate(await WardenService(db).update_warden(principal, warden_id, payload))


@router.delete("/{warden_id}", response_model=MessageResponse)
async def delete_warden(
    warden_id: str,
    principal: Principal = Depends(admin_only),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await WardenService(db).delete_warden(principal, warden_id)
    return MessageResponse(message="Warden deleted successfully")
