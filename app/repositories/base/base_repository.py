"""
Base repository with standardized async CRUD operations and scope filtering.

Provides the foundation for all domain repositories. Repositories never
commit; the calling service owns the transaction.
"""

from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select, false, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from app.core.logging import get_logger
from app.models.base.base_model import BaseModel
from app.models.student.student_profile import StudentProfile
from app.services.common.errors import DuplicateRecordError, ServiceError, ValidationError
from app.services.common.permissions import Scope, ScopeKind

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


# Driver messages for unique violations: SQLite "UNIQUE constraint failed",
# PostgreSQL "duplicate key value violates unique constraint".
UNIQUE_VIOLATION_MARKERS = ("unique constraint", "duplicate key")


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return any(marker in message for marker in UNIQUE_VIOLATION_MARKERS)


def integrity_error_to_service_error(exc: IntegrityError, resource_type: str) -> ServiceError:
    """
    Unique violations become DuplicateRecordError (409); NOT NULL, foreign
    key and check failures become ValidationError (400).
    """
    if is_unique_violation(exc):
        return DuplicateRecordError(resource_type)
    return ValidationError(f"{resource_type} is missing a required value or references an unknown record")


def apply_owner_scope(stmt: Select, owner_column: InstrumentedAttribute, scope: Scope) -> Select:
    """
    Restrict ``stmt`` to rows whose owning student falls inside ``scope``.

    ``owner_column`` is the column holding the StudentProfile id, or the
    StudentProfile primary key itself when listing students.
    """
    if scope.kind == ScopeKind.ALL:
        return stmt
    if scope.kind == ScopeKind.HOSTEL_BLOCK:
        block_students = select(StudentProfile.id).where(
            StudentProfile.hostel_block == scope.hostel_block
        )
        return stmt.where(owner_column.in_(block_students))
    if scope.kind == ScopeKind.OWNER:
        return stmt.where(owner_column == scope.student_id)
    return stmt.where(false())


class BaseRepository(Generic[ModelType]):
    """
    Abstract base repository with standardized operations.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    # ==================== Read Operations ====================

    async def get_by_id(self, entity_id: str) -> Optional[ModelType]:
        """
        Fetch one entity, refreshing any stale copy already in the session
        so relationships reflect the latest foreign keys.
        """
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all(self, stmt: Optional[Select] = None) -> List[ModelType]:
        result = await self.session.execute(stmt if stmt is not None else select(self.model))
        return list(result.scalars().all())

    async def count(self, stmt: Optional[Select] = None) -> int:
        base = stmt if stmt is not None else select(self.model)
        total = await self.session.scalar(select(func.count()).select_from(base.subquery()))
        return int(total or 0)

    # ==================== Write Operations ====================

    async def add(self, entity: ModelType) -> ModelType:
        """
        Stage ``entity`` and flush so database defaults and constraints apply.

        Raises:
            DuplicateRecordError: If a unique constraint rejects the row
        """
        self.session.add(entity)
        await self.flush()
        logger.debug(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    async def add_all(self, entities: Sequence[ModelType]) -> List[ModelType]:
        self.session.add_all(entities)
        await self.flush()
        return list(entities)

    async def update(self, entity: ModelType, values: dict[str, Any]) -> ModelType:
        for key, value in values.items():
            setattr(entity, key, value)
        await self.flush()
        return entity

    async def delete(self, entity: ModelType) -> None:
        await self.session.delete(entity)
        await self.flush()

    async def flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.warning(
                f"Integrity error on {self.model.__name__}",
                extra={"error": str(exc.orig)},
            )
            raise integrity_error_to_service_error(exc, self.model.__name__) from exc


class OwnedRepository(BaseRepository[ModelType]):
    """
    Repository for student-owned records. Every listing goes through the
    caller's scope on the model's ``owner_field`` column.
    """

    owner_field: str = "student_id"

    @property
    def owner_column(self) -> InstrumentedAttribute:
        return getattr(self.model, self.owner_field)

    def scoped(self, scope: Scope, stmt: Optional[Select] = None) -> Select:
        stmt = stmt if stmt is not None else select(self.model)
        return apply_owner_scope(stmt, self.owner_column, scope)

    async def list_scoped(self, scope: Scope, *criteria: Any, order_by: Any = None) -> List[ModelType]:
        stmt = self.scoped(scope).where(*criteria)
        stmt = stmt.order_by(order_by if order_by is not None else self.model.created_at.desc())
        return await self.find_all(stmt)

    async def count_scoped(self, scope: Scope, *criteria: Any) -> int:
        return await self.count(self.scoped(scope).where(*criteria))

    async def recent(self, scope: Scope, limit: int = 5) -> List[ModelType]:
        stmt = self.scoped(scope).order_by(self.model.created_at.desc()).limit(limit)
        return await self.find_all(stmt)
