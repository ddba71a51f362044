"""Content queries - categories and learning content."""

from learnhub.application.queries.content.category_queries import (
    GetCategoryQuery,
    ListCategoriesQuery,
)
from learnhub.application.queries.content.content_queries import (
    GetContentQuery,
    ListContentQuery,
    SearchContentQuery,
)

__all__ = [
    "GetCategoryQuery",
    "GetContentQuery",
    "ListCategoriesQuery",
    "ListContentQuery",
    "SearchContentQuery",
]
