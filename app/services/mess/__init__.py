from app.services.mess.mess_service import DEFAULT_WEEKLY_MENU, MessService

__all__ = ["DEFAULT_WEEKLY_MENU", "MessService"]
