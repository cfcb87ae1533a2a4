# --- File: app/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.

Field names are snake_case in Python and camelCase on the wire; both
spellings are accepted on input.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
    "reject_null",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas inherit from this to ensure consistent
    aliasing and ORM loading.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
        str_strip_whitespace=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for request bodies. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class BaseUpdateSchema(BaseCreateSchema):
    """
    Base schema for update operations.

    Note:
        Subclasses intended for partial updates declare their fields as
        Optional with a None default; only fields the client actually sent
        are applied.
    """

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


def reject_null(value):
    """Field validator for optional update fields backed by NOT NULL columns."""
    if value is None:
        raise ValueError("Field cannot be null")
    return value


class BaseResponseSchema(BaseSchema):
    """Base schema for persisted entities with ID and timestamps."""

    id: str = Field(..., description="Unique identifier")
    created_at: Optional[datetime] = Field(default=None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(default=None, description="Last update timestamp")
