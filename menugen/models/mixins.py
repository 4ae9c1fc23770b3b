"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """Mixin to add a created_at timestamp column."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
