"""User queries - read-only access to users."""

from learnhub_identity.application.queries.get_user_query import GetUserQuery
from learnhub_identity.application.queries.list_users_query import (
    ListUsersQuery,
    UserListResult,
)

__all__ = [
    "GetUserQuery",
    "ListUsersQuery",
    "UserListResult",
]
