"""
Attendance marking and queries.

Marking is an idempotent upsert keyed by (student, day): marking a day again
overwrites the existing record. The unique constraint on the table settles
concurrent first marks; the losing insert surfaces as DuplicateRecordError.
"""

from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import settings
from app.models.attendance.attendance_record import AttendanceRecord
from app.models.student.student_profile import StudentProfile
from app.repositories.attendance import AttendanceRepository
from app.repositories.student import StudentRepository
from app.schemas.attendance import AttendanceEntry, AttendanceMark, AttendanceStats, BulkAttendanceMark
from app.services.attendance.attendance_report_service import compute_stats, month_bounds
from app.services.base import BaseService
from app.services.common.errors import NotFoundError
from app.services.common.permissions import (
    Action,
    Principal,
    ResourceKind,
    Scope,
    ensure_in_scope,
    scope,
)


class AttendanceService(BaseService[AttendanceRepository]):
    resource_type = "Attendance"

    def __init__(self, session: AsyncSession):
        super().__init__(AttendanceRepository(session), session)
        self._students = StudentRepository(session)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    async def list_records(
        self,
        principal: Principal,
        day: Optional[date] = None,
        hostel_block: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> List[AttendanceRecord]:
        """The block filter is an admin convenience; a warden's block is implied."""
        record_scope = scope(principal, ResourceKind.ATTENDANCE, Action.READ)
        return await self.repository.search(
            record_scope,
            day=day,
            student_id=student_id,
            hostel_block=hostel_block if principal.is_admin else None,
        )

    async def student_records(
        self,
        principal: Principal,
        student_id: str,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[AttendanceRecord]:
        record_scope = scope(principal, ResourceKind.ATTENDANCE, Action.READ)
        student = await self._load_student(student_id)
        ensure_in_scope(principal, record_scope, student, resource_type=self.resource_type)
        return await self._records_for(record_scope, student.id, month, year)

    async def my_records(
        self,
        principal: Principal,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[AttendanceRecord]:
        record_scope = scope(principal, ResourceKind.ATTENDANCE, Action.READ)
        return await self._records_for(record_scope, principal.student_id, month, year)

    async def _records_for(
        self,
        record_scope: Scope,
        student_id: str,
        month: Optional[int],
        year: Optional[int],
    ) -> List[AttendanceRecord]:
        start = end = None
        if month and year:
            start, end = month_bounds(month, year)
        elif year:
            start, end = date(year, 1, 1), date(year + 1, 1, 1)
        return await self.repository.search(record_scope, student_id=student_id, start=start, end=end)

    async def stats(
        self,
        principal: Principal,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> AttendanceStats:
        """Month statistics over the caller's scope, defaulting to the current month."""
        record_scope = scope(principal, ResourceKind.ATTENDANCE, Action.READ)
        today = date.today()
        month = month or today.month
        year = year or today.year
        start, end = month_bounds(month, year)

        records = await self.repository.search(record_scope, start=start, end=end)
        total_students = await self._students.count_scoped(record_scope)
        return compute_stats(
            records,
            total_students=total_students,
            low_threshold=settings.LOW_ATTENDANCE_THRESHOLD,
            month=month,
            year=year,
        )

    # ------------------------------------------------------------------ #
    # Marking
    # ------------------------------------------------------------------ #
    async def mark(self, principal: Principal, payload: AttendanceMark) -> Tuple[AttendanceRecord, bool]:
        """
        Upsert one day for one student.

        Returns:
            The stored record and whether it was newly created
        """
        record_scope = scope(principal, ResourceKind.ATTENDANCE, Action.WRITE)
        student = await self._load_student(payload.student_id)
        ensure_in_scope(principal, record_scope, student, resource_type=self.resource_type)

        record, created = await self._upsert(principal, payload.attendance_date, payload)
        await self._commit()
        self._logger.info(
            "Attendance marked",
            extra={
                "student_id": student.id,
                "date": payload.attendance_date.isoformat(),
                "status": payload.status.value,
                "was_created": created,
            },
        )
        return await self._reload(record.id), created

    async def bulk_mark(self, principal: Principal, payload: BulkAttendanceMark) -> int:
        """Mark a whole list for one day in a single transaction; any failure marks nothing."""
        record_scope = scope(principal, ResourceKind.ATTENDANCE, Action.WRITE)
        requested = [entry.student_id for entry in payload.records]
        students = {s.id: s for s in await self._students.existing_ids(requested)}

        for student_id in requested:
            student = students.get(student_id)
            if student is None:
                raise NotFoundError("Student", student_id)
            ensure_in_scope(principal, record_scope, student, resource_type=self.resource_type)

        for entry in payload.records:
            await self._upsert(principal, payload.attendance_date, entry)
        await self._commit()

        self._logger.info(
            "Attendance bulk marked",
            extra={"date": payload.attendance_date.isoformat(), "count": len(payload.records)},
        )
        return len(payload.records)

    async def _upsert(
        self,
        principal: Principal,
        day: date,
        entry: AttendanceEntry,
    ) -> Tuple[AttendanceRecord, bool]:
        values = {
            "status": entry.status,
            "time_in": entry.time_in,
            "time_out": entry.time_out,
            "remarks": entry.remarks,
            "marked_by_id": principal.user_id,
        }
        existing = await self.repository.get_for_day(entry.student_id, day)
        if existing is not None:
            return await self.repository.update(existing, values), False

        record = await self.repository.add(
            AttendanceRecord(student_id=entry.student_id, attendance_date=day, **values)
        )
        return record, True

    async def _load_student(self, student_id: str) -> StudentProfile:
        student = await self._students.get_by_id(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)
        return student
