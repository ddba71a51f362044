"""DTO for content results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from learnhub.domain.content import Content


@dataclass(frozen=True)
class ContentDTO:
    """Content information for display."""

    id: str
    title: str
    description: Optional[str]
    type: str
    topic: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, content: Content) -> ContentDTO:
        return cls(
            id=str(content.id),
            title=content.title,
            description=content.description,
            type=content.type.value,
            topic=content.topic,
            created_by=content.created_by,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )
