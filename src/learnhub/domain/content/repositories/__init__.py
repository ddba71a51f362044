from learnhub.domain.content.repositories.category_repository import (
    CategoryRepository,
)
from learnhub.domain.content.repositories.content_repository import (
    ContentRepository,
)

__all__ = [
    "CategoryRepository",
    "ContentRepository",
]
