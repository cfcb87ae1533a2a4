# app/services/__init__.py
"""
Service layer root package.

Each subpackage implements application use-cases on top of:

- SQLAlchemy models (app.models.*)
- Repositories (app.repositories.*)
- Pydantic schemas (app.schemas.*)
- Common service infrastructure (app.services.common.*)

Typical pattern for a service:

    class SomeService(BaseService[SomeRepository]):
        async def some_use_case(self, principal, ...):
            record_scope = scope(principal, ResourceKind.SOME, Action.WRITE)
            entity = await self._get_in_scope(entity_id, principal, record_scope)
            ...
            await self._commit()
"""
