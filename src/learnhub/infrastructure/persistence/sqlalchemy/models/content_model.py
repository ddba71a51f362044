"""SQLAlchemy model for Content aggregate."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from learnhub.infrastructure.persistence.sqlalchemy.functions import unicode_lower
from learnhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ContentModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Content aggregates.

    ``topic`` and ``created_by`` are plain strings without foreign keys;
    the content domain service checks both references.
    """

    __tablename__ = "contents"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    topic: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    created_by: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<ContentModel(id={self.id}, title={self.title}, type={self.type})>"


# Titles are unique ignoring case, non-ASCII letters included
Index(
    "uq_contents_title_lower",
    unicode_lower(ContentModel.title),
    unique=True,
)
