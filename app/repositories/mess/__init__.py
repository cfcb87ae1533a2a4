from app.repositories.mess.mess_repository import MessFeedbackRepository, MessMenuRepository

__all__ = ["MessFeedbackRepository", "MessMenuRepository"]
