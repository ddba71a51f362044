"""Category schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from learnhub.application.dtos import CategoryDTO


class CategoryWriteRequest(BaseModel):
    """Request schema for creating or updating a category."""

    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: Optional[str] = Field(None, description="Optional description")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Python", "description": "Programming in Python"},
            ],
        },
    }


class CategoryResponse(BaseModel):
    """Response schema for a category."""

    id: UUID
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: CategoryDTO) -> CategoryResponse:
        return cls(
            id=UUID(dto.id),
            name=dto.name,
            description=dto.description,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
