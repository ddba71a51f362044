"""Shared domain components.

This module exports shared value objects, exceptions, and utilities
used across module boundaries (identity and content).
"""

from learnhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
    InvalidFormatError,
    ValidationError,
)
from learnhub.domain.shared.identifier import Identifier
from learnhub.domain.shared.time import advance, ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "FieldValidationError",
    "InvalidFormatError",
    "EntityNotFoundError",
    "ConflictError",
    # Value objects
    "Identifier",
    # Utilities
    "advance",
    "ensure_tz_aware",
    "utc_now",
]
