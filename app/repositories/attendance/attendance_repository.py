"""
Attendance repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.attendance.attendance_record import AttendanceRecord
from app.models.student.student_profile import StudentProfile
from app.repositories.base.base_repository import OwnedRepository
from app.services.common.permissions import Scope


class AttendanceRepository(OwnedRepository[AttendanceRecord]):
    """Repository for daily attendance records."""

    def __init__(self, session: AsyncSession):
        super().__init__(AttendanceRecord, session)

    async def get_for_day(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        stmt = select(AttendanceRecord).where(
            AttendanceRecord.student_id == student_id,
            AttendanceRecord.attendance_date == day,
        )
        return await self.session.scalar(stmt)

    async def search(
        self,
        scope: Scope,
        *,
        day: Optional[date] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        student_id: Optional[str] = None,
        hostel_block: Optional[str] = None,
    ) -> List[AttendanceRecord]:
        """Records inside ``scope``; ``start`` is inclusive and ``end`` exclusive."""
        criteria = []
        if day is not None:
            criteria.append(AttendanceRecord.attendance_date == day)
        if start is not None:
            criteria.append(AttendanceRecord.attendance_date >= start)
        if end is not None:
            criteria.append(AttendanceRecord.attendance_date < end)
        if student_id is not None:
            criteria.append(AttendanceRecord.student_id == student_id)
        if hostel_block is not None:
            criteria.append(
                AttendanceRecord.student_id.in_(
                    select(StudentProfile.id).where(StudentProfile.hostel_block == hostel_block)
                )
            )
        return await self.list_scoped(
            scope,
            *criteria,
            order_by=AttendanceRecord.attendance_date.desc(),
        )
