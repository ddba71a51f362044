"""Content domain value objects."""

from learnhub.domain.content.value_objects.category_id import CategoryId
from learnhub.domain.content.value_objects.content_id import ContentId
from learnhub.domain.content.value_objects.content_type import ContentType

__all__ = [
    "CategoryId",
    "ContentId",
    "ContentType",
]
