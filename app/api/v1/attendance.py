"""
Attendance endpoints.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_roles
from app.models.base.enums import UserRole
from app.schemas.attendance import (
    AttendanceMark,
    AttendanceResponse,
    AttendanceStats,
    BulkAttendanceMark,
    BulkMarkResponse,
)
from app.services.attendance import AttendanceService
from app.services.common.permissions import Principal

router = APIRouter(prefix="/attendance", tags=["Attendance"])

markers = require_roles(UserRole.WARDEN, UserRole.ADMIN)


def _many(records) -> List[AttendanceResponse]:
    return [AttendanceResponse.model_validate(r) for r in records]


@router.get("", response_model=List[AttendanceResponse])
async def list_attendance(
    day: Optional[date] = Query(default=None, alias="date"),
    hostel_block: Optional[str] = Query(default=None, alias="hostelBlock"),
    student_id: Optional[str] = Query(default=None, alias="studentId"),
    principal: Principal = Depends(markers),
    db: AsyncSession = Depends(get_db),
) -> List[AttendanceResponse]:
    records = await AttendanceService(db).list_records(principal, day, hostel_block, student_id)
    return _many(records)


@router.get("/my-attendance", response_model=List[AttendanceResponse])
async def list_my_attendance(
    month: Optional[int] = Query(default=None, ge=1, le=12),
    year: Optional[int] = Query(default=None, ge=2000, le=2100),
    principal: Principal = Depends(require_roles(UserRole.STUDENT)),
    db: AsyncSession = Depends(get_db),
) -> List[AttendanceResponse]:
    return _many(await AttendanceService(db).my_records(principal, month, year))


@router.get("/records/{student_id}", response_model=List[AttendanceResponse])
async def list_student_attendance(
    student_id: str,
    month: Optional[int] = Query(default=None, ge=1, le=12),
    year: Optional[int] = Query(default=None, ge=2000, le=2100),
    principal: Principal = Depends(require_roles()),
    db: AsyncSession = Depends(get_db),
) -> List[AttendanceResponse]:
    return _many(await AttendanceService(db).student_records(principal, student_id, month, year))


@router.get("/stats", response_model=AttendanceStats)
async def attendance_stats(
    month: Optional[int] = Query(default=None, ge=1, le=12),
    year: Optional[int] = Query(default=None, ge=2000, le=2100),
    principal: Principal = Depends(markers),
    db: AsyncSession = Depends(get_db),
) -> AttendanceStats:
    """Statistics for the caller's scope; defaults to the current month."""
    return await AttendanceService(db).stats(principal, month, year)


@router.post("/mark", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
async def mark_attendance(
    payload: AttendanceMark,
    response: Response,
    principal: Principal = Depends(markers),
    db: AsyncSession = Depends(get_db),
) -> AttendanceResponse:
    """Creates the day's record (201) or overwrites it (200)."""
    record, created = await AttendanceService(db).mark(principal, payload)
    if not created:
        response.status_code = status.HTTP_200_OK
    return AttendanceResponse.model_validate(record)


@router.post("/bulk-mark", response_model=BulkMarkResponse)
async def bulk_mark_attendance(
    payload: BulkAttendanceMark,
    principal: Principal = Depends(markers),
    db: AsyncSession = Depends(get_db),
) -> BulkMarkResponse:
    count = await AttendanceService(db).bulk_mark(principal, payload)
    return BulkMarkResponse(message="Attendance marked successfully", count=count)
