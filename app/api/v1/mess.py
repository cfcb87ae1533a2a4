"""
Mess menu and feedback endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import UserRole, Weekday
from app.schemas.mess import FeedbackCreate, FeedbackResponse, MenuDayEntry, MenuDayUpdate, MessMenuResponse
from app.services.common.permissions import Principal
from app.services.mess import MessService

router = APIRouter(prefix="/mess", tags=["Mess"])

editors = require_roles(UserRole.ADMIN, UserRole.WARDEN)


@router.get("/menu", response_model=List[MessMenuResponse])
async def read_menu(
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> List[MessMenuResponse]:
    """The weekly menu, Monday to Sunday."""
    menus = await MessService(db).get_menu(principal)
    return [MessMenuResponse.model_validate(m) for m in menus]


@router.put("/menu/{day}", response_model=MessMenuResponse)
async def update_menu_day(
    day: Weekday,
    payload: MenuDayUpdate,
    principal: Principal = Depends(editors),
    db: AsyncSession = Depends(get_db),
) -> MessMenuResponse:
    return MessMenuResponse.model_validate(await MessService(db).upsert_day(principal, day, payload))


@router.put("/menu", response_model=List[MessMenuResponse])
async def update_menu(
    payload: List[MenuDayEntry],
    principal: Principal = Depends(editors),
    db: AsyncSession = Depends(get_db),
) -> List[MessMenuResponse]:
    menus = await MessService(db).bulk_upsert(principal, payload)
    return [MessMenuResponse.model_validate(m) for m in menus]


@router.post("/feedback", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    payload: FeedbackCreate,
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> FeedbackResponse:
    return FeedbackResponse.model_validate(await MessService(db).submit_feedback(principal, payload))


@router.get("/feedback", response_model=List[FeedbackResponse])
async def list_feedback(
    principal: Principal = Depends(editors),
    db: AsyncSession = Depends(get_db),
) -> List[FeedbackResponse]:
    return [FeedbackResponse.model_validate(f) for f in await MessService(db).list_feedback(principal)]


@router.get("/feedback/mine", response_model=List[FeedbackResponse])
async def list_my_feedback(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> List[FeedbackResponse]:
    return [FeedbackResponse.model_validate(f) for f in await MessService(db).my_feedback(principal)]
