from app.schemas.suggestion.suggestion import (
    CommentCreate,
    CommentResponse,
    SuggestionCreate,
    SuggestionRespond,
    SuggestionResponse,
    SuggestionStatusUpdate,
)

__all__ = [
    "CommentCreate",
    "CommentResponse",
    "SuggestionCreate",
    "SuggestionRespond",
    "SuggestionResponse",
    "SuggestionStatusUpdate",
]
