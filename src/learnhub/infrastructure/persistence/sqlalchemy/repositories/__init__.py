"""SQLAlchemy repository implementations for the content module."""

from learnhub.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # noqa: E501
    CategoryRepositorySQLAlchemy,
)
from learnhub.infrastructure.persistence.sqlalchemy.repositories.content_repository import (  # noqa: E501
    ContentRepositorySQLAlchemy,
)
from learnhub.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "CategoryRepositorySQLAlchemy",
    "ContentRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
]
