from app.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
)
from app.schemas.common.response import (
    CountResponse,
    ErrorResponse,
    MessageResponse,
    StudentSummary,
    UserSummary,
)

__all__ = [
    "BaseCreateSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "BaseUpdateSchema",
    "CountResponse",
    "ErrorResponse",
    "MessageResponse",
    "StudentSummary",
    "UserSummary",
]
