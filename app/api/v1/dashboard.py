"""
Dashboard statistics endpoints, one per role.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import UserRole
from app.schemas.dashboard import AdminDashboard, StudentDashboard, WardenDashboard
from app.services.common.permissions import Principal
from app.services.dashboard import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/admin/stats", response_model=AdminDashboard)
async def admin_stats(
    principal: Principal = Depends(require_roles(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
) -> AdminDashboard:
    return await DashboardService(db).admin_stats(principal)


@router.get("/warden/stats", response_model=WardenDashboard)
async def warden_stats(
    principal: Principal = Depends(require_roles(UserRole.WARDEN)),
    db: AsyncSession = Depends(get_db),
) -> WardenDashboard:
    return await DashboardService(db).warden_stats(principal)


@router.get("/student/stats", response_model=StudentDashboard)
async def student_stats(
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> StudentDashboard:
    return await DashboardService(db).student_stats(principal)
