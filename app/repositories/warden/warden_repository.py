"""
Warden profile repository.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user.user import User
from app.models.warden.warden_profile import WardenProfile
from app.repositories.base.base_repository import BaseRepository


class WardenRepository(BaseRepository[WardenProfile]):
    """Repository for warden profiles."""

    def __init__(self, session: AsyncSession):
        super().__init__(WardenProfile, session)

    async def list_all(self, hostel_block: Optional[str] = None) -> List[WardenProfile]:
        stmt = select(WardenProfile)
        if hostel_block:
            stmt = stmt.where(WardenProfile.hostel_block == hostel_block)
        return await self.find_all(stmt.order_by(WardenProfile.hostel_block, WardenProfile.created_at))

    async def delete_with_user(self, warden: WardenProfile) -> None:
        user_id = warden.user_id
        await self.session.execute(delete(WardenProfile).where(WardenProfile.id == warden.id))
        await self.session.execute(delete(User).where(User.id == user_id))
