"""Update, deactivate, reactivate or delete users."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from learnhub_identity.application.dtos import UserDTO
from learnhub_identity.domain.user import (
    Email,
    User,
    UserDomainService,
    UserId,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from learnhub_identity.application.factories import UserRepositoryFactory

logger = logging.getLogger(__name__)


async def _load_user(
    user_repo: UserRepository,
    user_id: Union[str, UUID, UserId],
) -> User:
    uid = user_id if isinstance(user_id, UserId) else UserId.from_string(user_id)
    user = await user_repo.find_by_id(uid)
    if user is None:
        raise UserNotFoundError(uid)
    return user


class UpdateUserCommand:
    """Replace a user's profile fields."""

    def __init__(
        self,
        user_repository: UserRepository,
        user_domain_service: UserDomainService,
    ):
        self._user_repo = user_repository
        self._user_service = user_domain_service

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> UpdateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            user_domain_service=UserDomainService.from_factory(factory),
        )

    async def execute(  # noqa: PLR0913
        self,
        user_id: Union[str, UUID, UserId],
        first_name: str,
        last_name: str,
        email: str,
        age: int,
    ) -> UserDTO:
        user = await _load_user(self._user_repo, user_id)

        email_obj = Email(email)
        await self._user_service.ensure_email_is_unique_for_update(
            new_email=email_obj,
            current_email=user.email,
        )

        user.update_information(
            first_name=first_name,
            last_name=last_name,
            email=email_obj,
            age=age,
        )
        await self._user_repo.save(user)

        logger.info("User updated: %s", user.id)
        return UserDTO.from_entity(user)


class DeactivateUserCommand:
    """Deactivate a user (soft delete). The record stays retrievable."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> DeactivateUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: Union[str, UUID, UserId]) -> UserDTO:
        user = await _load_user(self._user_repo, user_id)

        user.deactivate()
        await self._user_repo.save(user)

        logger.info("User deactivated: %s", user.id)
        return UserDTO.from_entity(user)


class ReactivateUserCommand:
    """Command to reactivate a deactivated user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> ReactivateUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: Union[str, UUID, UserId]) -> UserDTO:
        user = await _load_user(self._user_repo, user_id)

        user.activate()
        await self._user_repo.save(user)

        logger.info("User reactivated: %s", user.id)
        return UserDTO.from_entity(user)


class DeleteUserCommand:
    """Command to permanently delete a user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> DeleteUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: Union[str, UUID, UserId]) -> None:
        user = await _load_user(self._user_repo, user_id)
        await self._user_repo.delete(user.id)
        logger.info("User deleted permanently: %s", user.id)
