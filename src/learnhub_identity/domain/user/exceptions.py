"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations. All of them map onto the shared
domain hierarchy so the API layer can translate them uniformly.
"""

from typing import Any

from learnhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_FORMAT,
            details={"field": "email", "value": str(value) if value else None},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message=f"Email already registered: {email}",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: Any) -> None:
        self.user_id = str(user_id)
        super().__init__(
            message=f"User not found: {user_id}",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": self.user_id},
        )
