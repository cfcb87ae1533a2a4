"""
Complaint repository.
"""

from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import ComplaintCategory, TicketStatus
from app.models.complaint.complaint import Complaint
from app.repositories.base.base_repository import OwnedRepository
from app.services.common.permissions import Scope


class ComplaintRepository(OwnedRepository[Complaint]):
    """Repository for complaints."""

    def __init__(self, session: AsyncSession):
        super().__init__(Complaint, session)

    async def search(
        self,
        scope: Scope,
        status: Optional[TicketStatus] = None,
        category: Optional[ComplaintCategory] = None,
        statuses: Optional[Iterable[TicketStatus]] = None,
    ) -> List[Complaint]:
        criteria = []
        if status is not None:
            criteria.append(Complaint.status == status)
        if statuses is not None:
            criteria.append(Complaint.status.in_(list(statuses)))
        if category is not None:
            criteria.append(Complaint.category == category)
        return await self.list_scoped(scope, *criteria)

    async def count_by_status(self, scope: Scope, *statuses: TicketStatus) -> int:
        return await self.count_scoped(scope, Complaint.status.in_(statuses))
