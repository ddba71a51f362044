"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from learnhub_identity.domain.user.aggregates.user import User
from learnhub_identity.domain.user.value_objects.email import Email
from learnhub_identity.domain.user.value_objects.user_id import UserId


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List all users, active or not."""

    @abstractmethod
    async def find_all_active(self) -> list[User]:
        """List only active users."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user by ID."""
