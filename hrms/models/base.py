"""
SQLAlchemy declarative base and mixins.

Defines the base configuration for SQLAlchemy models using SQLAlchemy 2.0
style with async support. All timestamps are stored as naive UTC.
"""
from datetime import datetime, timezone

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, matching the stored columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class CreatedAtMixin:
    """Mixin that adds a created_at timestamp column."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        server_default=func.now(),
        nullable=False
    )


class TimestampMixin(CreatedAtMixin):
    """Mixin that adds created_at and updated_at timestamp columns."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False
    )
