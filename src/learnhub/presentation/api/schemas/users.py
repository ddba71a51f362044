"""User schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from learnhub_identity.application.dtos import UserDTO


class UserWriteRequest(BaseModel):
    """Request schema for creating or updating a user."""

    first_name: str = Field(..., min_length=1, max_length=50, description="Given name")
    last_name: str = Field(..., min_length=1, max_length=50, description="Family name")
    email: str = Field(..., min_length=3, max_length=255, description="Email address")
    age: int = Field(..., ge=0, le=150, strict=True, description="Age in years")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Ann",
                    "last_name": "Lee",
                    "email": "ann@example.com",
                    "age": 30,
                },
            ],
        },
    }


class UserResponse(BaseModel):
    """Response schema for a user."""

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    age: int
    is_active: bool = Field(..., description="False once the user is deactivated")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: UserDTO) -> UserResponse:
        return cls(
            id=UUID(dto.id),
            first_name=dto.first_name,
            last_name=dto.last_name,
            full_name=dto.full_name,
            email=dto.email,
            age=dto.age,
            is_active=dto.is_active,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class UserListResponse(BaseModel):
    """Response schema for a list of users."""

    users: list[UserResponse]
    total: int = Field(..., description="Number of users returned")
