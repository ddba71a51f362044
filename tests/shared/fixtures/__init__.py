"""Shared test fixtures and builders."""

from tests.shared.fixtures.factories import make_category, make_content, make_user
from tests.shared.fixtures.in_memory import (
    InMemoryCategoryRepository,
    InMemoryContentRepository,
    InMemoryRepositoryFactory,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryContentRepository",
    "InMemoryRepositoryFactory",
    "InMemoryUserRepository",
    "make_category",
    "make_content",
    "make_user",
]
