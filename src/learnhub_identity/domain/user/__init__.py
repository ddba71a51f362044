"""User domain manages learner and author profiles.

This domain handles:
- User aggregate (id, names, email, age, active flag)
- Email uniqueness across all users
- Soft deletion through deactivation
"""

from learnhub_identity.domain.user.aggregates import User
from learnhub_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from learnhub_identity.domain.user.repositories import UserRepository
from learnhub_identity.domain.user.services import UserDomainService
from learnhub_identity.domain.user.value_objects import Email, UserId

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserDomainService",
    "UserId",
    "UserNotFoundError",
    "UserRepository",
]
