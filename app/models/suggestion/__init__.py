from app.models.suggestion.suggestion import Suggestion, SuggestionComment

__all__ = ["Suggestion", "SuggestionComment"]
