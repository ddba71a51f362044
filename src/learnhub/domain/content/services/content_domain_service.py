"""Content consistency domain service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from learnhub.domain.content.exceptions import (
    CategoryNotFoundError,
    ContentTitleAlreadyExistsError,
    InactiveCreatorError,
)
from learnhub.domain.content.repositories import (
    CategoryRepository,
    ContentRepository,
)
from learnhub.domain.content.value_objects import CategoryId, ContentId
from learnhub.domain.shared.exceptions import FieldValidationError
from learnhub_identity.domain.user import (
    User,
    UserId,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from learnhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ContentDomainService:
    """Check the rules that span several aggregates.

    Each method reads through a repository and raises on the first violated
    rule. Callers run them in a fixed order before touching the aggregate,
    so a failed check never leaves a partial write behind.
    """

    def __init__(
        self,
        content_repository: ContentRepository,
        category_repository: CategoryRepository,
        user_repository: UserRepository,
    ):
        self._content_repo = content_repository
        self._category_repo = category_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ContentDomainService:
        return cls(
            content_repository=factory.content_repository(),
            category_repository=factory.category_repository(),
            user_repository=factory.user_repository(),
        )

    async def ensure_title_is_unique(self, title: str) -> None:
        await self._ensure_title_free(title, exclude=None)

    async def ensure_title_is_unique_for_update(
        self,
        new_title: str,
        current_content_id: ContentId,
    ) -> None:
        """Same as ``ensure_title_is_unique`` but ignores the content itself."""
        await self._ensure_title_free(new_title, exclude=current_content_id)

    async def ensure_category_topic_exists(self, category_id: CategoryId) -> None:
        if await self._category_repo.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

    async def ensure_creator_exists_and_is_active(
        self,
        creator_id: Union[str, UserId],
    ) -> User:
        uid = (
            creator_id
            if isinstance(creator_id, UserId)
            else UserId.from_string(creator_id)
        )
        user = await self._user_repo.find_by_id(uid)
        if user is None:
            raise UserNotFoundError(uid)
        if not user.is_active:
            raise InactiveCreatorError(uid)
        return user

    async def _ensure_title_free(
        self,
        title: str,
        exclude: Optional[ContentId],
    ) -> None:
        if not isinstance(title, str) or not title.strip():
            msg = "Title cannot be empty"
            raise FieldValidationError("title", msg)

        wanted = title.strip().lower()
        # search() is a substring match, so compare the candidates exactly
        for candidate in await self._content_repo.search(title.strip()):
            if exclude is not None and candidate.id == exclude:
                continue
            if candidate.title.strip().lower() == wanted:
                logger.debug("Title already taken: %s", title)
                raise ContentTitleAlreadyExistsError(title.strip())
