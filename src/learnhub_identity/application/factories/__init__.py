from learnhub_identity.application.factories.repository_factory import (
    UserRepositoryFactory,
)

__all__ = ["UserRepositoryFactory"]
