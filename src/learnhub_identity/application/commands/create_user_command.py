"""Create a new user."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from learnhub_identity.application.dtos import UserDTO
from learnhub_identity.domain.user import (
    Email,
    User,
    UserDomainService,
    UserRepository,
)

if TYPE_CHECKING:
    from learnhub_identity.application.factories import UserRepositoryFactory

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Register a user after checking that the email is free."""

    def __init__(
        self,
        user_repository: UserRepository,
        user_domain_service: UserDomainService,
    ):
        self._user_repo = user_repository
        self._user_service = user_domain_service

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> CreateUserCommand:
        return cls(
            user_repository=factory.user_repository(),
            user_domain_service=UserDomainService.from_factory(factory),
        )

    async def execute(
        self,
        first_name: str,
        last_name: str,
        email: str,
        age: int,
    ) -> UserDTO:
        email_obj = Email(email)
        await self._user_service.ensure_email_is_unique(email_obj)

        user = User.create(
            first_name=first_name,
            last_name=last_name,
            email=email_obj,
            age=age,
        )
        await self._user_repo.save(user)

        logger.info("User created: %s", user.id)
        return UserDTO.from_entity(user)
