"""
Suggestion use-cases: the ticket workflow plus responses and a comment
thread open to everyone who can see the suggestion.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import TicketStatus, UserRole
from app.models.suggestion.suggestion import Suggestion
from app.repositories.suggestion import OPEN_STATUSES, SuggestionRepository
from app.schemas.suggestion import SuggestionCreate
from app.services.base import BaseService
from app.services.common import workflow
from app.services.common.permissions import Action, Principal, ResourceKind, require_role, scope


class SuggestionService(BaseService[SuggestionRepository]):
    resource_type = "Suggestion"

    def __init__(self, session: AsyncSession):
        super().__init__(SuggestionRepository(session), session)

    async def list_suggestions(
        self,
        principal: Principal,
        status: Optional[TicketStatus] = None,
        open_only: bool = False,
    ) -> List[Suggestion]:
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.READ)
        return await self.repository.search(
            record_scope,
            status=status,
            statuses=OPEN_STATUSES if open_only else None,
        )

    async def count_open(self, principal: Principal) -> int:
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.READ)
        return await self.repository.count_open(record_scope)

    async def get_suggestion(self, principal: Principal, suggestion_id: str) -> Suggestion:
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.READ)
        return await self._get_in_scope(suggestion_id, principal, record_scope)

    async def create_suggestion(self, principal: Principal, payload: SuggestionCreate) -> Suggestion:
        require_role(principal, [UserRole.STUDENT], error_message="Only students can submit suggestions")
        scope(principal, ResourceKind.SUGGESTION, Action.WRITE)

        suggestion = await self.repository.add(
            Suggestion(
                student_id=principal.student_id,
                title=payload.title,
                description=payload.description,
                category=payload.category,
            )
        )
        await self._commit()
        self._logger.info(
            "Suggestion submitted",
            extra={"suggestion_id": suggestion.id, "student_id": principal.student_id},
        )
        return await self._reload(suggestion.id)

    async def update_status(
        self,
        principal: Principal,
        suggestion_id: str,
        status: TicketStatus,
        response: Optional[str] = None,
    ) -> Suggestion:
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.WRITE)
        suggestion = await self._get_in_scope(suggestion_id, principal, record_scope)

        workflow.apply_transition(suggestion, status, principal, resource_type=self.resource_type)
        if response:
            suggestion.response = response
        await self._commit()
        return await self._reload(suggestion_id)

    async def respond(self, principal: Principal, suggestion_id: str, response: str) -> Suggestion:
        """Record the handler's response without changing the status."""
        require_role(principal, workflow.HANDLER_ROLES, error_message="Only wardens and admins can respond")
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.WRITE)
        suggestion = await self._get_in_scope(suggestion_id, principal, record_scope)

        suggestion.response = response
        suggestion.responded_by_id = principal.user_id
        suggestion.responded_at = datetime.now(timezone.utc)
        await self._commit()
        return await self._reload(suggestion_id)

    async def add_comment(self, principal: Principal, suggestion_id: str, text: str) -> Suggestion:
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.WRITE)
        suggestion = await self._get_in_scope(suggestion_id, principal, record_scope)

        await self.repository.add_comment(suggestion, principal.user_id, text)
        suggestion.updated_at = datetime.now(timezone.utc)
        await self._commit()
        return await self._reload(suggestion_id)

    async def delete_suggestion(self, principal: Principal, suggestion_id: str) -> None:
        record_scope = scope(principal, ResourceKind.SUGGESTION, Action.WRITE)
        suggestion = await self._get_in_scope(suggestion_id, principal, record_scope)
        workflow.ensure_deletable(suggestion, principal, resource_type=self.resource_type)
        await self.repository.delete(suggestion)
        await self._commit()
        self._logger.info("Suggestion deleted", extra={"suggestion_id": suggestion_id, "by": principal.user_id})
