"""List users query - retrieve users for display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from learnhub_identity.application.dtos import UserDTO
from learnhub_identity.domain.user import UserRepository

if TYPE_CHECKING:
    from learnhub_identity.application.factories import UserRepositoryFactory


@dataclass
class UserListResult:
    """Result of listing users."""

    users: list[UserDTO]
    total_count: int


class ListUsersQuery:
    """Query to list all users or only the active ones."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: UserRepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, active_only: bool = False) -> UserListResult:
        if active_only:
            users = await self._user_repo.find_all_active()
        else:
            users = await self._user_repo.find_all()

        dtos = [UserDTO.from_entity(u) for u in users]
        return UserListResult(users=dtos, total_count=len(dtos))
