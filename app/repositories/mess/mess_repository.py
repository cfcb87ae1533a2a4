"""
Mess menu and feedback repositories.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import Weekday
from app.models.mess.menu_feedback import MessFeedback
from app.models.mess.mess_menu import MessMenu
from app.repositories.base.base_repository import BaseRepository, OwnedRepository


class MessMenuRepository(BaseRepository[MessMenu]):
    """The weekly menu is global; no scoping applies."""

    def __init__(self, session: AsyncSession):
        super().__init__(MessMenu, session)

    async def list_week(self) -> List[MessMenu]:
        menus = await self.find_all(select(MessMenu))
        return sorted(menus, key=lambda menu: menu.day.order)

    async def get_by_day(self, day: Weekday) -> Optional[MessMenu]:
        return await self.session.scalar(select(MessMenu).where(MessMenu.day == day))


class MessFeedbackRepository(OwnedRepository[MessFeedback]):
    def __init__(self, session: AsyncSession):
        super().__init__(MessFeedback, session)
