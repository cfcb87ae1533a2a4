"""
User repository.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import UserRole
from app.models.user.user import User
from app.repositories.base.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user accounts."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.strip().lower())
        return await self.session.scalar(stmt)

    async def email_exists(self, email: str, exclude_user_id: Optional[str] = None) -> bool:
        stmt = select(User.id).where(func.lower(User.email) == email.strip().lower())
        if exclude_user_id:
            stmt = stmt.where(User.id != exclude_user_id)
        return await self.session.scalar(stmt) is not None

    async def count_by_role(self, role: UserRole) -> int:
        return await self.count(select(User).where(User.role == role))
