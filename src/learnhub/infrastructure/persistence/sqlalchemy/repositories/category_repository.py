"""SQLAlchemy implementation of CategoryRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.content import (
    Category,
    CategoryId,
    CategoryNotFoundError,
    CategoryRepository,
)
from learnhub.domain.shared.time import ensure_tz_aware
from learnhub.infrastructure.persistence.sqlalchemy.models import CategoryModel

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of the CategoryRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, category_id: CategoryId) -> Category | None:
        model = await self._find_model_by_id(category_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def add(self, category: Category) -> None:
        self._session.add(self._map_to_model(category))
        await self._session.flush()
        logger.info("Created category: %s (%s)", category.id, category.name)

    async def update(self, category: Category) -> None:
        model = await self._find_model_by_id(category.id)
        if model is None:
            raise CategoryNotFoundError(category.id)

        model.name = category.name
        model.description = category.description
        model.updated_at = category.updated_at
        await self._session.flush()
        logger.debug("Updated category: %s", category.id)

    async def delete(self, category_id: CategoryId) -> None:
        model = await self._find_model_by_id(category_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted category: %s", category_id)

    async def _find_model_by_id(self, category_id: CategoryId) -> CategoryModel | None:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id.value)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: CategoryModel) -> Category:
        return Category.reconstitute(
            id=CategoryId(model.id),
            name=model.name,
            description=model.description,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, category: Category) -> CategoryModel:
        return CategoryModel(
            id=category.id.value,
            name=category.name,
            description=category.description,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
