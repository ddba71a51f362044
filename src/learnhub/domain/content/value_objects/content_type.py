"""Content type enumeration."""

from enum import Enum
from typing import Any

from learnhub.domain.content.exceptions import InvalidContentTypeError


class ContentType(str, Enum):
    """Kinds of learning content."""

    TEXT = "text"
    VIDEO = "video"
    QUIZ = "quiz"
    INTERACTIVE_LAB = "interactive_lab"

    @classmethod
    def parse(cls, value: Any) -> "ContentType":
        """Parse a raw value case-insensitively (``"VIDEO"`` -> ``VIDEO``)."""
        if isinstance(value, ContentType):
            return value
        if not isinstance(value, str) or not value.strip():
            raise InvalidContentTypeError(value)
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise InvalidContentTypeError(value) from e
