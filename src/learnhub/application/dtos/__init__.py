"""Data transfer objects returned by commands and queries."""

from learnhub.application.dtos.content import CategoryDTO, ContentDTO

__all__ = ["CategoryDTO", "ContentDTO"]
