"""
Warden management. Admins own the lifecycle; a warden can read their own
profile.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import UserRole
from app.models.user.user import User
from app.models.warden.warden_profile import WardenProfile
from app.repositories.user import UserRepository
from app.repositories.warden import WardenRepository
from app.schemas.warden import WardenCreate, WardenUpdate
from app.services.base import BaseService
from app.services.common.errors import AlreadyExistsError
from app.services.common.permissions import (
    Action,
    PermissionDenied,
    Principal,
    ResourceKind,
    require_role,
    scope,
)
from app.services.common.security import hash_password

USER_FIELDS = ("name", "email", "status")


class WardenService(BaseService[WardenRepository]):
    resource_type = "Warden"

    def __init__(self, session: AsyncSession):
        super().__init__(WardenRepository(session), session)
        self._users = UserRepository(session)

    async def list_wardens(self, principal: Principal, hostel_block: Optional[str] = None) -> List[WardenProfile]:
        require_role(principal, [UserRole.ADMIN])
        return await self.repository.list_all(hostel_block)

    async def get_warden(self, principal: Principal, warden_id: str) -> WardenProfile:
        record_scope = scope(principal, ResourceKind.WARDEN, Action.READ)
        warden = await self._get_or_404(warden_id)
        if not record_scope.permits_warden(warden.id):
            raise PermissionDenied(
                "You do not have access to this warden",
                user_id=principal.user_id,
                role=principal.role,
            )
        return warden

    async def get_own_profile(self, principal: Principal) -> WardenProfile:
        scope(principal, ResourceKind.WARDEN, Action.READ)
        return await self._get_or_404(principal.warden_id)

    async def create_warden(self, principal: Principal, payload: WardenCreate) -> WardenProfile:
        scope(principal, ResourceKind.WARDEN, Action.WRITE)
        if await self._users.email_exists(payload.email):
            raise AlreadyExistsError("User", "email", payload.email)

        user = await self._users.add(
            User(
                name=payload.name,
                email=payload.email.lower(),
                password_hash=hash_password(payload.password),
                role=UserRole.WARDEN,
                status=payload.status,
            )
        )
        warden = await self.repository.add(
            WardenProfile(
                user_id=user.id,
                hostel_block=payload.hostel_block,
                contact_number=payload.contact_number,
            )
        )
        await self._commit()
        self._logger.info(
            "Warden created",
            extra={"warden_id": warden.id, "hostel_block": warden.hostel_block, "by": principal.user_id},
        )
        return await self._reload(warden.id)

    async def update_warden(self, principal: Principal, warden_id: str, payload: WardenUpdate) -> WardenProfile:
        scope(principal, ResourceKind.WARDEN, Action.WRITE)
        warden = await self._get_or_404(warden_id)
        changes = payload.changes()

        user_changes = {key: changes.pop(key) for key in USER_FIELDS if key in changes}
        password = changes.pop("password", None)
        if password:
            user_changes["password_hash"] = hash_password(password)
        if "email" in user_changes:
            user_changes["email"] = user_changes["email"].lower()
            if await self._users.email_exists(user_changes["email"], exclude_user_id=warden.user_id):
                raise AlreadyExistsError("User", "email", user_changes["email"])

        if user_changes:
            await self._users.update(warden.user, user_changes)
        if changes:
            await self.repository.update(warden, changes)
        await self._commit()
        return await self._reload(warden.id)

    async def delete_warden(self, principal: Principal, warden_id: str) -> None:
        scope(principal, ResourceKind.WARDEN, Action.WRITE)
        warden = await self._get_or_404(warden_id)
        await self.repository.delete_with_user(warden)
        await self._commit()
        self._logger.info("Warden deleted", extra={"warden_id": warden_id, "by": principal.user_id})
