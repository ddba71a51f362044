"""Exception hierarchy shared by the identity and content modules.

Three families map onto HTTP statuses in the API layer:

- ``ValidationError``: the input is malformed or breaks a field rule (400)
- ``EntityNotFoundError``: a referenced record does not exist (404)
- ``ConflictError``: the input is valid but clashes with stored state (409)

Module exceptions subclass one of them and pick a specific ``ErrorCode``.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients. Do not rename."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_CONTENT_TYPE = "INVALID_CONTENT_TYPE"

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    CONTENT_NOT_FOUND = "CONTENT_NOT_FOUND"

    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_TITLE = "DUPLICATE_TITLE"
    INACTIVE_CREATOR = "INACTIVE_CREATOR"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """
    Root of all LearnHub domain errors.

    Attributes
    ----------
    message
        Text shown to API clients
    code
        Stable ``ErrorCode``
    details
        Extra context for logs, e.g. ``{"field": "age"}``
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    default_code = ErrorCode.VALIDATION_ERROR


class FieldValidationError(ValidationError):
    """A single aggregate field violates its rule; ``field`` names it."""

    def __init__(
        self,
        field: str,
        message: str,
        code: Optional[ErrorCode] = None,
    ) -> None:
        self.field = field
        super().__init__(message, code, details={"field": field})


class InvalidFormatError(ValidationError):
    """A raw value (usually an id) could not be parsed."""

    def __init__(self, kind: str, value: Any) -> None:
        super().__init__(
            f"Invalid {kind} format: {value}",
            ErrorCode.INVALID_FORMAT,
            details={"kind": kind, "value": str(value)},
        )


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT
