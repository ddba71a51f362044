"""Content commands - operations on categories and learning content."""

from learnhub.application.commands.content.create_category_command import (
    CreateCategoryCommand,
)
from learnhub.application.commands.content.create_content_command import (
    CreateContentCommand,
)
from learnhub.application.commands.content.update_category_command import (
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from learnhub.application.commands.content.update_content_command import (
    ChangeContentTypeCommand,
    DeleteContentCommand,
    UpdateContentCommand,
)

__all__ = [
    "ChangeContentTypeCommand",
    "CreateCategoryCommand",
    "CreateContentCommand",
    "DeleteCategoryCommand",
    "DeleteContentCommand",
    "UpdateCategoryCommand",
    "UpdateContentCommand",
]
