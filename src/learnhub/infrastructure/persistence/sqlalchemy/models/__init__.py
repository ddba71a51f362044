"""SQLAlchemy models for persistence layer."""

from learnhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from learnhub.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from learnhub.infrastructure.persistence.sqlalchemy.models.content_model import (
    ContentModel,
)

__all__ = [
    "Base",
    "CategoryModel",
    "ContentModel",
    "TimestampMixin",
]
