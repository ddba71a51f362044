"""Update or delete categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union
from uuid import UUID

from learnhub.application.dtos import CategoryDTO
from learnhub.domain.content import (
    Category,
    CategoryId,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


async def _load_category(
    category_repo: CategoryRepository,
    category_id: Union[str, UUID, CategoryId],
) -> Category:
    cid = (
        category_id
        if isinstance(category_id, CategoryId)
        else CategoryId.from_string(category_id)
    )
    category = await category_repo.find_by_id(cid)
    if category is None:
        raise CategoryNotFoundError(cid)
    return category


class UpdateCategoryCommand:
    """Rename a category or change its description."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: Union[str, UUID, CategoryId],
        name: str,
        description: Optional[str] = None,
    ) -> CategoryDTO:
        category = await _load_category(self._category_repo, category_id)

        category.update_information(name=name, description=description)
        await self._category_repo.update(category)

        logger.info("Category updated: %s", category.id)
        return CategoryDTO.from_entity(category)


class DeleteCategoryCommand:
    """Command to permanently delete a category.

    Content filed under the category keeps its ``topic`` value; the
    reference is only checked when content is created or updated.
    """

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: Union[str, UUID, CategoryId]) -> None:
        category = await _load_category(self._category_repo, category_id)
        await self._category_repo.delete(category.id)
        logger.info("Category deleted: %s", category.id)
