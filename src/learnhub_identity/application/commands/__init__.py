"""User commands - operations that change user state."""

from learnhub_identity.application.commands.create_user_command import (
    CreateUserCommand,
)
from learnhub_identity.application.commands.update_user_command import (
    DeactivateUserCommand,
    DeleteUserCommand,
    ReactivateUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "CreateUserCommand",
    "DeactivateUserCommand",
    "DeleteUserCommand",
    "ReactivateUserCommand",
    "UpdateUserCommand",
]
