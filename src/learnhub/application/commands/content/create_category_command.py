"""Create a category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from learnhub.application.dtos import CategoryDTO
from learnhub.domain.content import Category, CategoryRepository

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    """Create a new category."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        name: str,
        description: Optional[str] = None,
    ) -> CategoryDTO:
        category = Category.create(name=name, description=description)
        await self._category_repo.add(category)

        logger.info("Category created: %s (%s)", category.id, category.name)
        return CategoryDTO.from_entity(category)
