from app.models.mess.menu_feedback import MessFeedback
from app.models.mess.mess_menu import MessMenu

__all__ = ["MessFeedback", "MessMenu"]
