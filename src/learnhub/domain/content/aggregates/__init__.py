from learnhub.domain.content.aggregates.category import Category
from learnhub.domain.content.aggregates.content import Content

__all__ = ["Category", "Content"]
