"""
Base service class providing common functionality for all services.
"""

from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.repositories.base.base_repository import BaseRepository, integrity_error_to_service_error
from app.services.common.errors import NotFoundError
from app.services.common.permissions import Principal, Scope, ensure_in_scope

TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(Generic[TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Explicit commits with integrity errors mapped to service errors
    - Scoped single-record lookups (404 when missing, 403 when out of scope)
    """

    resource_type: str = "Resource"

    def __init__(self, repository: TRepo, session: AsyncSession):
        self.repository: TRepo = repository
        self.session: AsyncSession = session
        self._logger = get_logger(self.__class__.__name__).bind(resource_type=self.resource_type)

    async def _commit(self, resource_type: Optional[str] = None) -> None:
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            self._logger.warning(
                "Commit rejected by a constraint",
                extra={"resource_type": resource_type or self.resource_type, "error": str(exc.orig)},
            )
            raise integrity_error_to_service_error(exc, resource_type or self.resource_type) from exc

    async def _get_or_404(self, entity_id: str):
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.resource_type, entity_id)
        return entity

    async def _get_in_scope(self, entity_id: str, principal: Principal, record_scope: Scope):
        """Fetch a student-owned record and check it against the caller's scope."""
        entity = await self._get_or_404(entity_id)
        ensure_in_scope(principal, record_scope, entity.student, resource_type=self.resource_type)
        return entity

    async def _reload(self, entity_id: str):
        """Re-read after a commit so relationships reflect updated foreign keys."""
        return await self._get_or_404(entity_id)
