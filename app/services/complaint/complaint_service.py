"""
Complaint use-cases. Every read and write resolves the caller's scope
first; status changes go through the shared ticket workflow.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import ComplaintCategory, TicketStatus, UserRole
from app.models.complaint.complaint import Complaint
from app.repositories.complaint import ComplaintRepository
from app.schemas.complaint import ComplaintCreate
from app.services.base import BaseService
from app.services.common import workflow
from app.services.common.permissions import Action, Principal, ResourceKind, require_role, scope


class ComplaintService(BaseService[ComplaintRepository]):
    resource_type = "Complaint"

    def __init__(self, session: AsyncSession):
        super().__init__(ComplaintRepository(session), session)

    async def list_complaints(
        self,
        principal: Principal,
        status: Optional[TicketStatus] = None,
        category: Optional[ComplaintCategory] = None,
    ) -> List[Complaint]:
        record_scope = scope(principal, ResourceKind.COMPLAINT, Action.READ)
        return await self.repository.search(record_scope, status=status, category=category)

    async def get_complaint(self, principal: Principal, complaint_id: str) -> Complaint:
        record_scope = scope(principal, ResourceKind.COMPLAINT, Action.READ)
        return await self._get_in_scope(complaint_id, principal, record_scope)

    async def create_complaint(self, principal: Principal, payload: ComplaintCreate) -> Complaint:
        """The owner is stamped from the caller, never taken from the request."""
        require_role(principal, [UserRole.STUDENT], error_message="Only students can raise complaints")
        scope(principal, ResourceKind.COMPLAINT, Action.WRITE)

        complaint = await self.repository.add(
            Complaint(
                student_id=principal.student_id,
                title=payload.title,
                description=payload.description,
                category=payload.category,
            )
        )
        await self._commit()
        self._logger.info(
            "Complaint raised",
            extra={"complaint_id": complaint.id, "student_id": principal.student_id},
        )
        return await self._reload(complaint.id)

    async def update_status(
        self,
        principal: Principal,
        complaint_id: str,
        status: TicketStatus,
        resolution: Optional[str] = None,
    ) -> Complaint:
        record_scope = scope(principal, ResourceKind.COMPLAINT, Action.WRITE)
        complaint = await self._get_in_scope(complaint_id, principal, record_scope)
        previous = complaint.status

        workflow.apply_transition(complaint, status, principal, resource_type=self.resource_type)
        if resolution:
            complaint.resolution = resolution
        await self._commit()

        self._logger.info(
            "Complaint status changed",
            extra={
                "complaint_id": complaint_id,
                "from_status": previous.value,
                "to_status": status.value,
                "by": principal.user_id,
            },
        )
        return await self._reload(complaint_id)

    async def resolve(self, principal: Principal, complaint_id: str, resolution: str) -> Complaint:
        return await self.update_status(principal, complaint_id, TicketStatus.RESOLVED, resolution)

    async def delete_complaint(self, principal: Principal, complaint_id: str) -> None:
        record_scope = scope(principal, ResourceKind.COMPLAINT, Action.WRITE)
        complaint = await self._get_in_scope(complaint_id, principal, record_scope)
        workflow.ensure_deletable(complaint, principal, resource_type=self.resource_type)
        await self.repository.delete(complaint)
        await self._commit()
        self._logger.info("Complaint deleted", extra={"complaint_id": complaint_id, "by": principal.user_id})
