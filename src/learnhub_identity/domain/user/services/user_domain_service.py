"""User consistency domain service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from learnhub_identity.domain.user.exceptions import EmailAlreadyExistsError
from learnhub_identity.domain.user.repositories import UserRepository
from learnhub_identity.domain.user.value_objects import Email

if TYPE_CHECKING:
    from learnhub_identity.application.factories import UserRepositoryFactory

logger = logging.getLogger(__name__)


class UserDomainService:
    """Enforce email uniqueness across all users.

    The checks read through the repository before the write happens. The
    unique index on ``users.email`` catches the writes that race past them.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> UserDomainService:
        return cls(user_repository=factory.user_repository())

    async def ensure_email_is_unique(self, email: Union[str, Email]) -> None:
        email_obj = email if isinstance(email, Email) else Email(email)
        if await self._user_repo.exists_by_email(email_obj):
            logger.debug("Email already taken: %s", email_obj.value)
            raise EmailAlreadyExistsError(email_obj.value)

    async def ensure_email_is_unique_for_update(
        self,
        new_email: Union[str, Email],
        current_email: Union[str, Email],
    ) -> None:
        """Like ``ensure_email_is_unique`` but a user may keep its own email."""
        new_obj = new_email if isinstance(new_email, Email) else Email(new_email)
        current_obj = (
            current_email if isinstance(current_email, Email) else Email(current_email)
        )
        if new_obj == current_obj:
            return
        await self.ensure_email_is_unique(new_obj)
