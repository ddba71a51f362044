"""Pydantic schemas for the LearnHub API."""

from learnhub.presentation.api.schemas.categories import (
    CategoryResponse,
    CategoryWriteRequest,
)
from learnhub.presentation.api.schemas.common import ErrorResponse, HealthResponse
from learnhub.presentation.api.schemas.content import (
    ContentCreateRequest,
    ContentResponse,
    ContentTypeChangeRequest,
    ContentUpdateRequest,
)
from learnhub.presentation.api.schemas.users import (
    UserListResponse,
    UserResponse,
    UserWriteRequest,
)

__all__ = [
    "CategoryResponse",
    "CategoryWriteRequest",
    "ContentCreateRequest",
    "ContentResponse",
    "ContentTypeChangeRequest",
    "ContentUpdateRequest",
    "ErrorResponse",
    "HealthResponse",
    "UserListResponse",
    "UserResponse",
    "UserWriteRequest",
]
