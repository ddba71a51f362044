"""DTO for user query and command results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from learnhub_identity.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """User profile for display."""

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    age: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=str(user.id),
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            email=user.email.value,
            age=user.age,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
