"""SQLAlchemy models for identity management."""

from learnhub_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["UserModel"]
