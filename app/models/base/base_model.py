"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base and the abstract base classes shared by
every table: a string UUID primary key and timestamp tracking.
"""

import enum
import re
from datetime import datetime, timezone
from typing import Type
from uuid import uuid4

from sqlalchemy import DateTime, Enum, String
from sqlalchemy.orm import Mapped, declarative_base, declared_attr, mapped_column

# Create declarative base
Base = declarative_base()


def utcnow() -> datetime:
    """Current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def enum_column(enum_cls: Type[enum.Enum], length: int = 20) -> Enum:
    """String-backed enum column that stores member values rather than names."""
    return Enum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        validate_strings=True,
        length=length,
    )


class BaseModel(Base):
    """
    Abstract base model with a UUID primary key.

    Table names default to the snake_case plural of the class name.
    """

    __abstract__ = True

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        nullable=False,
        comment="Primary key (UUID)",
    )

    @declared_attr.directive
    def __tablename__(cls) -> str:
        name = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', cls.__name__)
        return re.sub('([a-z0-9])([A-Z])', r'\1_\2', name).lower() + 's'

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"


class TimestampModel(BaseModel):
    """Base model with created_at and updated_at managed on the Python side."""

    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
        comment="Record creation timestamp (UTC)",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        comment="Record last update timestamp (UTC)",
    )
