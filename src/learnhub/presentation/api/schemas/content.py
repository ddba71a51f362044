"""Content schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from learnhub.application.dtos import ContentDTO

CONTENT_TYPE_HELP = "One of: text, video, quiz, interactive_lab (case-insensitive)"


class ContentCreateRequest(BaseModel):
    """Request schema for creating content."""

    title: str = Field(..., min_length=1, max_length=255, description="Unique title")
    description: Optional[str] = Field(None, description="Optional description")
    type: str = Field(..., min_length=1, description=CONTENT_TYPE_HELP)
    topic: str = Field(..., description="Category id the content is filed under")
    created_by: str = Field(..., description="User id of the author")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Intro to Python",
                    "description": "Variables, loops and functions",
                    "type": "video",
                    "topic": "0b8f3c9e-5d2a-4e7b-9a55-3f1c2d7e8a90",
                    "created_by": "6a1e2f3b-4c5d-4e6f-8a9b-0c1d2e3f4a5b",
                },
            ],
        },
    }


class ContentUpdateRequest(BaseModel):
    """Request schema for updating content (title, description, topic)."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    topic: str = Field(..., description="Category id the content is filed under")


class ContentTypeChangeRequest(BaseModel):
    """Request schema for changing the content type."""

    type: str = Field(..., min_length=1, description=CONTENT_TYPE_HELP)


class ContentResponse(BaseModel):
    """Response schema for content."""

    id: UUID
    title: str
    description: Optional[str] = None
    type: str
    topic: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: ContentDTO) -> ContentResponse:
        return cls(
            id=UUID(dto.id),
            title=dto.title,
            description=dto.description,
            type=dto.type,
            topic=dto.topic,
            created_by=dto.created_by,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )
