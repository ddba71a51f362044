"""User domain value objects."""

from learnhub_identity.domain.user.value_objects.email import Email
from learnhub_identity.domain.user.value_objects.user_id import UserId

__all__ = [
    "Email",
    "UserId",
]
