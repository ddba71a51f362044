"""Content queries - read-only access to learning content."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from learnhub.application.dtos import ContentDTO
from learnhub.domain.content import (
    ContentId,
    ContentNotFoundError,
    ContentRepository,
)

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory


class GetContentQuery:
    """Query to fetch one piece of content."""

    def __init__(self, content_repository: ContentRepository):
        self._content_repo = content_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetContentQuery:
        return cls(content_repository=factory.content_repository())

    async def execute(self, content_id: Union[str, UUID, ContentId]) -> ContentDTO:
        cid = (
            content_id
            if isinstance(content_id, ContentId)
            else ContentId.from_string(content_id)
        )
        content = await self._content_repo.find_by_id(cid)
        if content is None:
            raise ContentNotFoundError(cid)
        return ContentDTO.from_entity(content)


class ListContentQuery:
    """Query to list all content."""

    def __init__(self, content_repository: ContentRepository):
        self._content_repo = content_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListContentQuery:
        return cls(content_repository=factory.content_repository())

    async def execute(self) -> list[ContentDTO]:
        contents = await self._content_repo.find_all()
        return [ContentDTO.from_entity(c) for c in contents]


class SearchContentQuery:
    """Query to search content by title or description (case-insensitive)."""

    def __init__(self, content_repository: ContentRepository):
        self._content_repo = content_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SearchContentQuery:
        return cls(content_repository=factory.content_repository())

    async def execute(self, text: Optional[str] = None) -> list[ContentDTO]:
        contents = await self._content_repo.search((text or "").strip())
        return [ContentDTO.from_entity(c) for c in contents]
