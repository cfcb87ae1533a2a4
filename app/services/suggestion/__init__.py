from app.services.suggestion.suggestion_service import SuggestionService

__all__ = ["SuggestionService"]
