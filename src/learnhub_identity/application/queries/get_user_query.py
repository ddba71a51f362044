"""Get a single user by id."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union
from uuid import UUID

from learnhub_identity.application.dtos import UserDTO
from learnhub_identity.domain.user import UserId, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from learnhub_identity.application.factories import UserRepositoryFactory


class GetUserQuery:
    """Query to fetch one user, active or not."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> GetUserQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: Union[str, UUID, UserId]) -> UserDTO:
        uid = user_id if isinstance(user_id, UserId) else UserId.from_string(user_id)
        user = await self._user_repo.find_by_id(uid)
        if user is None:
            raise UserNotFoundError(uid)
        return UserDTO.from_entity(user)
