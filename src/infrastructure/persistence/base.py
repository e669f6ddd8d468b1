"""Base model and mixins for the roster tables.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Base for models that can be updated (combines above)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities (dataclasses) should NOT inherit from this
- Domain entities are mapped to/from database models by the repositories

Usage:
    class CompanyModel(BaseMutableModel):
        __tablename__ = "companies"
        slug: Mapped[str]
        # Has: id, created_at, updated_at

Note: PostgreSQL is the production database, but the models stay portable
(SQLAlchemy's generic ``Uuid`` and ``DateTime`` types) so the test suite can
run against SQLite.
"""

from datetime import UTC, datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from the database.

    SQLite drops the offset on ``DateTime(timezone=True)`` columns; values are
    always written in UTC, so a naive value is UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: UUID primary key (time-ordered UUIDv7 unless supplied)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Repositories set ``updated_at`` explicitly on every mutation; the
    ``onupdate`` default only covers writes that bypass them.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - id: UUID primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
    """

    __abstract__ = True
