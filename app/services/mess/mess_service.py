"""
Mess menu and feedback service.
"""

from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base.enums import UserRole, Weekday
from app.models.mess.menu_feedback import MessFeedback
from app.models.mess.mess_menu import MessMenu
from app.repositories.mess import MessFeedbackRepository, MessMenuRepository
from app.schemas.mess import FeedbackCreate, MenuDayEntry, MenuDayUpdate
from app.services.base import BaseService
from app.services.common.errors import ValidationError
from app.services.common.permissions import Action, Principal, ResourceKind, require_role, scope

DEFAULT_WEEKLY_MENU: Dict[Weekday, Dict[str, str]] = {
    Weekday.MONDAY: {
        "breakfast": "Poha, Tea",
        "lunch": "Rice, Dal, Sabzi, Salad",
        "dinner": "Roti, Paneer Masala, Curd",
    },
    Weekday.TUESDAY: {
        "breakfast": "Sandwich, Milk, Fruits",
        "lunch": "Khichdi, Kadhi, Papad",
        "dinner": "Paratha, Butter, Pickle, Yogurt",
    },
    Weekday.WEDNESDAY: {
        "breakfast": "Idli, Sambar, Chutney",
        "lunch": "Jeera Rice, Rajma, Raita",
        "dinner": "Chole Bhature, Salad",
    },
    Weekday.THURSDAY: {
        "breakfast": "Cornflakes, Milk, Toast",
        "lunch": "Fried Rice, Manchurian",
        "dinner": "Dal Tadka, Rice, Papad",
    },
    Weekday.FRIDAY: {
        "breakfast": "Paratha, Curd, Pickle",
        "lunch": "Biryani, Raita",
        "dinner": "Roti, Mix Veg, Dal",
    },
    Weekday.SATURDAY: {
        "breakfast": "Dosa, Chutney, Sambar",
        "lunch": "Pulao, Chana Masala",
        "dinner": "Pav Bhaji, Buttermilk",
    },
    Weekday.SUNDAY: {
        "breakfast": "Pancakes, Honey, Fruits",
        "lunch": "Thali (Roti, Rice, 3 Sabzis, Dessert)",
        "dinner": "Sandwich, Soup",
    },
}


class MessService(BaseService[MessMenuRepository]):
    """
    Weekly menu maintenance and student feedback.

    The menu is global: every role reads it, wardens and admins edit it.
    Feedback belongs to the submitting student and is scoped like any other
    student-owned record.
    """

    resource_type = "Mess menu"

    def __init__(self, session: AsyncSession):
        super().__init__(MessMenuRepository(session), session)
        self._feedback = MessFeedbackRepository(session)

    # ------------------------------------------------------------------ #
    # Menu
    # ------------------------------------------------------------------ #
    async def get_menu(self, principal: Principal) -> List[MessMenu]:
        """Return the week Monday to Sunday, seeding the default menu on first read."""
        scope(principal, ResourceKind.MESS_MENU, Action.READ)
        menus = await self.repository.list_week()
        if menus:
            return menus

        await self.repository.add_all(
            [MessMenu(day=day, special_menu=False, **meals) for day, meals in DEFAULT_WEEKLY_MENU.items()]
        )
        await self._commit()
        self._logger.info("Seeded default weekly mess menu")
        return await self.repository.list_week()

    async def upsert_day(self, principal: Principal, day: Weekday, payload: MenuDayUpdate) -> MessMenu:
        scope(principal, ResourceKind.MESS_MENU, Action.WRITE)
        menu = await self._upsert(principal, day, payload)
        await self._commit()
        self._logger.info("Mess menu updated", extra={"day": day.value, "updated_by": principal.user_id})
        return menu

    async def bulk_upsert(self, principal: Principal, entries: List[MenuDayEntry]) -> List[MessMenu]:
        """Upsert several days at once; all entries are stored or none."""
        scope(principal, ResourceKind.MESS_MENU, Action.WRITE)
        days = [entry.day for entry in entries]
        if len(set(days)) != len(days):
            raise ValidationError("Each day may appear only once", field="day")

        menus = [await self._upsert(principal, entry.day, entry) for entry in entries]
        await self._commit()
        self._logger.info("Mess menu bulk updated", extra={"days": [d.value for d in days]})
        return sorted(menus, key=lambda menu: menu.day.order)

    async def _upsert(self, principal: Principal, day: Weekday, payload: MenuDayUpdate) -> MessMenu:
        values = {
            "breakfast": payload.breakfast,
            "lunch": payload.lunch,
            "dinner": payload.dinner,
            "updated_by_id": principal.user_id,
        }
        # Optional fields keep their stored value when omitted.
        if payload.notes is not None:
            values["notes"] = payload.notes
        if payload.special_menu is not None:
            values["special_menu"] = payload.special_menu

        menu = await self.repository.get_by_day(day)
        if menu is not None:
            return await self.repository.update(menu, values)
        values.setdefault("special_menu", False)
        return await self.repository.add(MessMenu(day=day, **values))

    # ------------------------------------------------------------------ #
    # Feedback
    # ------------------------------------------------------------------ #
    async def submit_feedback(self, principal: Principal, payload: FeedbackCreate) -> MessFeedback:
        require_role(principal, [UserRole.STUDENT], error_message="Only students can submit mess feedback")
        scope(principal, ResourceKind.MESS_FEEDBACK, Action.WRITE)
        feedback = await self._feedback.add(
            MessFeedback(
                student_id=principal.student_id,
                rating=payload.rating,
                feedback=payload.feedback,
            )
        )
        await self._commit("Mess feedback")
        return await self._feedback.get_by_id(feedback.id)

    async def list_feedback(self, principal: Principal) -> List[MessFeedback]:
        """Feedback visible to a warden or admin, newest first."""
        require_role(
            principal,
            [UserRole.WARDEN, UserRole.ADMIN],
            error_message="Only wardens and admins can review mess feedback",
        )
        record_scope = scope(principal, ResourceKind.MESS_FEEDBACK, Action.READ)
        return await self._feedback.list_scoped(record_scope)

    async def my_feedback(self, principal: Principal) -> List[MessFeedback]:
        require_role(principal, [UserRole.STUDENT])
        record_scope = scope(principal, ResourceKind.MESS_FEEDBACK, Action.READ)
        return await self._feedback.list_scoped(record_scope)
