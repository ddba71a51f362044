"""Category queries - read-only access to categories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union
from uuid import UUID

from learnhub.application.dtos import CategoryDTO
from learnhub.domain.content import (
    CategoryId,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory


class GetCategoryQuery:
    """Query to fetch one category."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCategoryQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: Union[str, UUID, CategoryId]) -> CategoryDTO:
        cid = (
            category_id
            if isinstance(category_id, CategoryId)
            else CategoryId.from_string(category_id)
        )
        category = await self._category_repo.find_by_id(cid)
        if category is None:
            raise CategoryNotFoundError(cid)
        return CategoryDTO.from_entity(category)


class ListCategoriesQuery:
    """Query to list all categories."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[CategoryDTO]:
        categories = await self._category_repo.find_all()
        return [CategoryDTO.from_entity(c) for c in categories]
