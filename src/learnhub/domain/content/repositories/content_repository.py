"""Content repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.content.aggregates import Content
from learnhub.domain.content.value_objects import ContentId


class ContentRepository(ABC):
    """Repository interface for Content aggregates."""

    @abstractmethod
    async def find_by_id(self, content_id: ContentId) -> Optional[Content]:
        """Find content by its ID."""

    @abstractmethod
    async def find_all(self) -> list[Content]:
        """List all content."""

    @abstractmethod
    async def search(self, text: str) -> list[Content]:
        """Case-insensitive substring search over title or description.

        Blank ``text`` returns all content.
        """

    @abstractmethod
    async def add(self, content: Content) -> None:
        """Persist new content."""

    @abstractmethod
    async def update(self, content: Content) -> None:
        """Persist changes to existing content."""

    @abstractmethod
    async def delete(self, content_id: ContentId) -> None:
        """Delete content by ID."""
