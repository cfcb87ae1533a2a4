from app.repositories.suggestion.suggestion_repository import OPEN_STATUSES, SuggestionRepository

__all__ = ["OPEN_STATUSES", "SuggestionRepository"]
