"""SQLAlchemy implementation of ContentRepository."""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.content import (
    Content,
    ContentId,
    ContentNotFoundError,
    ContentRepository,
    ContentTitleAlreadyExistsError,
)
from learnhub.domain.shared.time import ensure_tz_aware
from learnhub.infrastructure.persistence.sqlalchemy.functions import unicode_lower
from learnhub.infrastructure.persistence.sqlalchemy.models import ContentModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    message = str(error)
    return "UNIQUE constraint failed" in message or "unique" in message.lower()


class ContentRepositorySQLAlchemy(ContentRepository):
    """SQLAlchemy implementation of the ContentRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, content_id: ContentId) -> Content | None:
        model = await self._find_model_by_id(content_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(self) -> list[Content]:
        stmt = select(ContentModel).order_by(ContentModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def search(self, text: str) -> list[Content]:
        stmt = select(ContentModel).order_by(ContentModel.created_at)
        if text and text.strip():
            needle = text.strip().lower()
            stmt = stmt.where(
                or_(
                    unicode_lower(ContentModel.title).contains(needle, autoescape=True),
                    unicode_lower(ContentModel.description).contains(
                        needle, autoescape=True
                    ),
                )
            )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def add(self, content: Content) -> None:
        self._session.add(self._map_to_model(content))
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise ContentTitleAlreadyExistsError(content.title) from e
            raise
        logger.info("Created content: %s (%s)", content.id, content.title)

    async def update(self, content: Content) -> None:
        model = await self._find_model_by_id(content.id)
        if model is None:
            raise ContentNotFoundError(content.id)

        self._update_model(model, content)
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise ContentTitleAlreadyExistsError(content.title) from e
            raise
        logger.debug("Updated content: %s", content.id)

    async def delete(self, content_id: ContentId) -> None:
        model = await self._find_model_by_id(content_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted content: %s", content_id)

    async def _find_model_by_id(self, content_id: ContentId) -> ContentModel | None:
        stmt = select(ContentModel).where(ContentModel.id == content_id.value)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ContentModel) -> Content:
        return Content.reconstitute(
            id=ContentId(model.id),
            title=model.title,
            description=model.description,
            type=model.type,
            topic=model.topic,
            created_by=model.created_by,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, content: Content) -> ContentModel:
        return ContentModel(
            id=content.id.value,
            title=content.title,
            description=content.description,
            type=content.type.value,
            topic=content.topic,
            created_by=content.created_by,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )

    def _update_model(self, model: ContentModel, content: Content) -> None:
        model.title = content.title
        model.description = content.description
        model.type = content.type.value
        model.topic = content.topic
        model.updated_at = content.updated_at
