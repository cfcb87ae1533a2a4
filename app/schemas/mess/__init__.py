from app.schemas.mess.mess_menu_base import (
    FeedbackCreate,
    FeedbackResponse,
    MenuDayEntry,
    MenuDayUpdate,
    MessMenuResponse,
)

__all__ = [
    "FeedbackCreate",
    "FeedbackResponse",
    "MenuDayEntry",
    "MenuDayUpdate",
    "MessMenuResponse",
]
