"""DTO for category results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from learnhub.domain.content import Category


@dataclass(frozen=True)
class CategoryDTO:
    """Category information for display."""

    id: str
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> CategoryDTO:
        return cls(
            id=str(category.id),
            name=category.name,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
