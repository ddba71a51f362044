"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from learnhub.domain.content.aggregates import Category
from learnhub.domain.content.value_objects import CategoryId


class CategoryRepository(ABC):
    """Repository interface for Category aggregates."""

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by its ID."""

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """List all categories."""

    @abstractmethod
    async def add(self, category: Category) -> None:
        """Persist a new category."""

    @abstractmethod
    async def update(self, category: Category) -> None:
        """Persist changes to an existing category."""

    @abstractmethod
    async def delete(self, category_id: CategoryId) -> None:
        """Delete a category by ID."""
