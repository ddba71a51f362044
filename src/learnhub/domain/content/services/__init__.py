"""Domain services for the content domain."""

from learnhub.domain.content.services.content_domain_service import (
    ContentDomainService,
)

__all__ = ["ContentDomainService"]
