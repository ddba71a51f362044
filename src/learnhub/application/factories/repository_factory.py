"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Protocol

from learnhub.domain.content.repositories import (
    CategoryRepository,
    ContentRepository,
)
from learnhub_identity.application.factories import UserRepositoryFactory


class RepositoryFactory(UserRepositoryFactory, Protocol):
    """Protocol for creating repositories for both modules.

    Extends the identity factory so user commands and content commands can
    share one factory (and one database session) per request.
    """

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def content_repository(self) -> ContentRepository:
        """Get content repository."""
        ...
