"""Content domain: categories and the learning material filed under them.

This domain handles:
- Category aggregate (named topics)
- Content aggregate (title, type, topic, creator)
- Cross-aggregate checks (topic exists, creator active, unique titles)
"""

from learnhub.domain.content.aggregates import Category, Content
from learnhub.domain.content.exceptions import (
    CategoryNotFoundError,
    ContentNotFoundError,
    ContentTitleAlreadyExistsError,
    InactiveCreatorError,
    InvalidContentTypeError,
)
from learnhub.domain.content.repositories import (
    CategoryRepository,
    ContentRepository,
)
from learnhub.domain.content.services import ContentDomainService
from learnhub.domain.content.value_objects import CategoryId, ContentId, ContentType

__all__ = [
    "Category",
    "CategoryId",
    "CategoryNotFoundError",
    "CategoryRepository",
    "Content",
    "ContentDomainService",
    "ContentId",
    "ContentNotFoundError",
    "ContentRepository",
    "ContentTitleAlreadyExistsError",
    "ContentType",
    "InactiveCreatorError",
    "InvalidContentTypeError",
]
