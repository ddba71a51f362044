"""SQLAlchemy repository factory for request-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # noqa: E501
    CategoryRepositorySQLAlchemy,
)
from learnhub.infrastructure.persistence.sqlalchemy.repositories.content_repository import (  # noqa: E501
    ContentRepositorySQLAlchemy,
)
from learnhub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share the session, so the router commits or rolls back
    everything a use case wrote in one go.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._content_repo: ContentRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo

    def content_repository(self) -> ContentRepositorySQLAlchemy:
        if self._content_repo is None:
            self._content_repo = ContentRepositorySQLAlchemy(self._session)
        return self._content_repo
