"""Update, retype or delete learning content."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from learnhub.application.dtos import ContentDTO
from learnhub.domain.content import (
    CategoryId,
    Content,
    ContentDomainService,
    ContentId,
    ContentNotFoundError,
    ContentRepository,
)

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


async def _load_content(
    content_repo: ContentRepository,
    content_id: Union[str, UUID, ContentId],
) -> Content:
    cid = (
        content_id
        if isinstance(content_id, ContentId)
        else ContentId.from_string(content_id)
    )
    content = await content_repo.find_by_id(cid)
    if content is None:
        raise ContentNotFoundError(cid)
    return content


class UpdateContentCommand:
    """Change title, description and topic of existing content.

    The creator is not re-checked: deactivating an author does not freeze
    the content they wrote.
    """

    def __init__(
        self,
        content_repository: ContentRepository,
        content_domain_service: ContentDomainService,
    ):
        self._content_repo = content_repository
        self._content_service = content_domain_service

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateContentCommand:
        return cls(
            content_repository=factory.content_repository(),
            content_domain_service=ContentDomainService.from_factory(factory),
        )

    async def execute(
        self,
        content_id: Union[str, UUID, ContentId],
        title: str,
        description: Optional[str],
        topic: str,
    ) -> ContentDTO:
        content = await _load_content(self._content_repo, content_id)

        category_id = CategoryId.from_string(topic)
        await self._content_service.ensure_category_topic_exists(category_id)
        await self._content_service.ensure_title_is_unique_for_update(
            new_title=title,
            current_content_id=content.id,
        )

        content.update_information(
            title=title,
            description=description,
            topic=str(category_id),
        )
        await self._content_repo.update(content)

        logger.info("Content updated: %s", content.id)
        return ContentDTO.from_entity(content)


class ChangeContentTypeCommand:
    """Switch content to another type (e.g. text to video)."""

    def __init__(self, content_repository: ContentRepository):
        self._content_repo = content_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ChangeContentTypeCommand:
        return cls(content_repository=factory.content_repository())

    async def execute(
        self,
        content_id: Union[str, UUID, ContentId],
        new_type: str,
    ) -> ContentDTO:
        content = await _load_content(self._content_repo, content_id)

        content.change_type(new_type)
        await self._content_repo.update(content)

        logger.info("Content %s changed type to %s", content.id, content.type.value)
        return ContentDTO.from_entity(content)


class DeleteContentCommand:
    """Command to permanently delete content."""

    def __init__(self, content_repository: ContentRepository):
        self._content_repo = content_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteContentCommand:
        return cls(content_repository=factory.content_repository())

    async def execute(self, content_id: Union[str, UUID, ContentId]) -> None:
        content = await _load_content(self._content_repo, content_id)
        await self._content_repo.delete(content.id)
        logger.info("Content deleted: %s", content.id)
