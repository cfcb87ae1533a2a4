"""
Suggestion repository.
"""

from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import TicketStatus
from app.models.suggestion.suggestion import Suggestion, SuggestionComment
from app.repositories.base.base_repository import OwnedRepository
from app.services.common.permissions import Scope

OPEN_STATUSES = (TicketStatus.PENDING, TicketStatus.IN_PROGRESS)


class SuggestionRepository(OwnedRepository[Suggestion]):
    """Repository for suggestions and their comments."""

    def __init__(self, session: AsyncSession):
        super().__init__(Suggestion, session)

    async def search(
        self,
        scope: Scope,
        status: Optional[TicketStatus] = None,
        statuses: Optional[Iterable[TicketStatus]] = None,
    ) -> List[Suggestion]:
        criteria = []
        if status is not None:
            criteria.append(Suggestion.status == status)
        if statuses is not None:
            criteria.append(Suggestion.status.in_(list(statuses)))
        return await self.list_scoped(scope, *criteria)

    async def count_open(self, scope: Scope) -> int:
        return await self.count_scoped(scope, Suggestion.status.in_(OPEN_STATUSES))

    async def add_comment(self, suggestion: Suggestion, user_id: str, text: str) -> SuggestionComment:
        comment = SuggestionComment(suggestion_id=suggestion.id, user_id=user_id, text=text)
        self.session.add(comment)
        await self.flush()
        return comment
