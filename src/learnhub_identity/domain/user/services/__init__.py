"""Domain services for the user domain."""

from learnhub_identity.domain.user.services.user_domain_service import (
    UserDomainService,
)

__all__ = ["UserDomainService"]
