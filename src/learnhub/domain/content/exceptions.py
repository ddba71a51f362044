"""Content domain exceptions."""

from typing import Any

from learnhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
)


class InvalidContentTypeError(FieldValidationError):
    """Content type is not one of the supported kinds."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            field="type",
            message=f"Invalid content type: {value}",
            code=ErrorCode.INVALID_CONTENT_TYPE,
        )


class CategoryNotFoundError(EntityNotFoundError):
    """Category not found."""

    def __init__(self, category_id: Any) -> None:
        self.category_id = str(category_id)
        super().__init__(
            message=f"Category not found: {category_id}",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": self.category_id},
        )


class ContentNotFoundError(EntityNotFoundError):
    """Content not found."""

    def __init__(self, content_id: Any) -> None:
        self.content_id = str(content_id)
        super().__init__(
            message=f"Content not found: {content_id}",
            code=ErrorCode.CONTENT_NOT_FOUND,
            details={"content_id": self.content_id},
        )


class ContentTitleAlreadyExistsError(ConflictError):
    """Another content already uses this title (case-insensitive)."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(
            message=f"Content with title '{title}' already exists",
            code=ErrorCode.DUPLICATE_TITLE,
            details={"title": title},
        )


class InactiveCreatorError(ConflictError):
    """The creator exists but has been deactivated."""

    def __init__(self, user_id: Any) -> None:
        self.user_id = str(user_id)
        super().__init__(
            message=f"Creator is not active: {user_id}",
            code=ErrorCode.INACTIVE_CREATOR,
            details={"user_id": self.user_id},
        )
