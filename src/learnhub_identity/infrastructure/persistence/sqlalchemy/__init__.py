"""SQLAlchemy implementation for learnhub_identity persistence.

Provides:
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from learnhub_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from learnhub_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserModel",
    "UserRepositorySQLAlchemy",
]
