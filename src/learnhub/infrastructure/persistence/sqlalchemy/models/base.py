"""Declarative base shared by the identity and content tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from learnhub.domain.shared.time import utc_now


def _timestamp_column() -> Mapped[datetime]:
    # The aggregates set both values; the default only covers raw inserts
    return mapped_column(DateTime(timezone=True), default=utc_now, nullable=False)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """``created_at`` / ``updated_at`` columns, timezone-aware UTC."""

    created_at: Mapped[datetime] = _timestamp_column()
    updated_at: Mapped[datetime] = _timestamp_column()
