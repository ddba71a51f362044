"""Create learning content."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from learnhub.application.dtos import ContentDTO
from learnhub.domain.content import (
    CategoryId,
    Content,
    ContentDomainService,
    ContentRepository,
)

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateContentCommand:
    """Create content after the cross-aggregate checks pass.

    Check order:
    1. ``topic`` parses as a category id
    2. the category exists
    3. no other content has the same title (case-insensitive)
    4. the creator exists and is active
    5. the aggregate validates its own fields

    Nothing is written unless every step succeeds.
    """

    def __init__(
        self,
        content_repository: ContentRepository,
        content_domain_service: ContentDomainService,
    ):
        self._content_repo = content_repository
        self._content_service = content_domain_service

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateContentCommand:
        return cls(
            content_repository=factory.content_repository(),
            content_domain_service=ContentDomainService.from_factory(factory),
        )

    async def execute(  # noqa: PLR0913
        self,
        title: str,
        description: Optional[str],
        type: str,
        topic: str,
        created_by: str,
    ) -> ContentDTO:
        category_id = CategoryId.from_string(topic)
        await self._content_service.ensure_category_topic_exists(category_id)
        await self._content_service.ensure_title_is_unique(title)
        creator = await self._content_service.ensure_creator_exists_and_is_active(
            created_by
        )

        content = Content.create(
            title=title,
            description=description,
            type=type,
            topic=str(category_id),
            created_by=str(creator.id),
        )
        await self._content_repo.add(content)

        logger.info("Content created: %s (%s)", content.id, content.title)
        return ContentDTO.from_entity(content)
