"""Repository factory protocol for the identity application layer."""

from __future__ import annotations

from typing import Any, Protocol

from learnhub_identity.domain.user.repositories import UserRepository


class UserRepositoryFactory(Protocol):
    """Protocol for creating the repositories the user use cases need."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...
