"""
Role dashboards: headline counts plus a short recent-activity feed.

Every count goes through the caller's scope, so a warden's numbers cover
their hostel block and a student's numbers cover their own records.
"""

from datetime import date
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import TicketStatus, UserRole
from app.repositories.attendance import AttendanceRepository
from app.repositories.complaint import ComplaintRepository
from app.repositories.invoice import InvoiceRepository
from app.repositories.student import StudentRepository
from app.repositories.suggestion import SuggestionRepository
from app.repositories.user import UserRepository
from app.schemas.dashboard import ActivityItem, AdminDashboard, StudentDashboard, WardenDashboard
from app.schemas.student import StudentResponse
from app.services.attendance.attendance_report_service import attendance_percentage, month_bounds
from app.services.base import BaseService
from app.services.common.permissions import Action, Principal, ResourceKind, Scope, require_role, scope

RECENT_ACTIVITY_LIMIT = 5


class DashboardService(BaseService[StudentRepository]):
    resource_type = "Dashboard"

    def __init__(self, session: AsyncSession):
        super().__init__(StudentRepository(session), session)
        self._users = UserRepository(session)
        self._complaints = ComplaintRepository(session)
        self._suggestions = SuggestionRepository(session)
        self._invoices = InvoiceRepository(session)
        self._attendance = AttendanceRepository(session)

    async def admin_stats(self, principal: Principal) -> AdminDashboard:
        require_role(principal, [UserRole.ADMIN])
        everything = Scope.unrestricted()
        return AdminDashboard(
            total_students=await self.repository.count_scoped(everything),
            total_wardens=await self._users.count_by_role(UserRole.WARDEN),
            pending_complaints=await self._complaints.count_by_status(everything, TicketStatus.PENDING),
            open_suggestions=await self._suggestions.count_open(everything),
            unpaid_invoices=await self._invoices.count_unpaid(everything),
            recent_activity=await self._recent_activity(everything),
        )

    async def warden_stats(self, principal: Principal) -> WardenDashboard:
        require_role(principal, [UserRole.WARDEN])
        block = scope(principal, ResourceKind.COMPLAINT, Action.READ)
        return WardenDashboard(
            hostel_block=principal.hostel_block,
            total_students=await self.repository.count_scoped(block),
            pending_complaints=await self._complaints.count_by_status(block, TicketStatus.PENDING),
            open_suggestions=await self._suggestions.count_open(block),
            recent_activity=await self._recent_activity(block),
        )

    async def student_stats(self, principal: Principal) -> StudentDashboard:
        """The attendance percentage covers the current month."""
        require_role(principal, [UserRole.STUDENT])
        own = scope(principal, ResourceKind.COMPLAINT, Action.READ)
        profile = await self._get_or_404(principal.student_id)

        today = date.today()
        start, end = month_bounds(today.month, today.year)
        records = await self._attendance.search(own, student_id=profile.id, start=start, end=end)
        by_status = {}
        for record in records:
            by_status[record.status] = by_status.get(record.status, 0) + 1

        return StudentDashboard(
            profile=StudentResponse.model_validate(profile),
            pending_complaints=await self._complaints.count_by_status(own, TicketStatus.PENDING),
            unpaid_invoices=await self._invoices.count_unpaid(own),
            attendance_percentage=attendance_percentage(by_status),
            recent_activity=await self._recent_activity(own),
        )

    async def _recent_activity(self, record_scope: Scope) -> List[ActivityItem]:
        complaints = await self._complaints.recent(record_scope, RECENT_ACTIVITY_LIMIT)
        suggestions = await self._suggestions.recent(record_scope, RECENT_ACTIVITY_LIMIT)

        items = [
            ActivityItem(
                id=ticket.id,
                kind=kind,
                title=ticket.title,
                status=ticket.status.value,
                student_name=ticket.student.name if ticket.student else None,
                created_at=ticket.created_at,
            )
            for kind, tickets in (("complaint", complaints), ("suggestion", suggestions))
            for ticket in tickets
        ]
        items.sort(key=lambda item: item.created_at, reverse=True)
        return items[:RECENT_ACTIVITY_LIMIT]
