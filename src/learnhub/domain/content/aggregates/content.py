"""Content aggregate."""

from datetime import datetime
from typing import Any, Optional, Union

from learnhub.domain.content.value_objects import ContentId, ContentType
from learnhub.domain.shared.exceptions import FieldValidationError
from learnhub.domain.shared.time import advance, utc_now

MAX_TITLE_LENGTH = 255


def _require_text(field: str, value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"{label} cannot be empty"
        raise FieldValidationError(field, msg)
    return value.strip()


def _validate_title(value: Any) -> str:
    title = _require_text("title", value, "Title")
    if len(title) > MAX_TITLE_LENGTH:
        msg = f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
        raise FieldValidationError("title", msg)
    return title


def _clean_description(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class Content:
    """
    A piece of learning material (text, video, quiz or interactive lab).

    Business Rules:
    - Title is required, trimmed and at most 255 characters
    - Type is case-insensitive and stored lower-case
    - ``topic`` holds a category id and ``created_by`` a user id; both are
      soft references checked by ContentDomainService
    - Title uniqueness needs the repository and is checked by the service
    """

    def __init__(  # NOQA: PLR0913
        self,
        id: ContentId,
        title: str,
        description: Optional[str],
        type: ContentType,
        topic: str,
        created_by: str,
        created_at: datetime,
        updated_at: datetime,
    ):
        self._id = id
        self._title = title
        self._description = description
        self._type = type
        self._topic = topic
        self._created_by = created_by
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        description: Optional[str],
        type: Union[str, ContentType],
        topic: str,
        created_by: str,
    ) -> "Content":
        """
        Create new content.

        Parameters
        ----------
        title
            Display title, unique across all content (checked elsewhere)
        description
            Optional free text, trimmed when present
        type
            One of ``text``, ``video``, ``quiz``, ``interactive_lab`` in any case
        topic
            String id of the category the content is filed under
        created_by
            String id of the authoring user
        """
        title = _validate_title(title)
        description = _clean_description(description)
        content_type = ContentType.parse(type)
        topic = _require_text("topic", topic, "Topic")
        created_by = _require_text("created_by", created_by, "Creator id")

        now = utc_now()
        return cls(
            id=ContentId.generate(),
            title=title,
            description=description,
            type=content_type,
            topic=topic,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: ContentId,
        title: str,
        description: Optional[str],
        type: Union[str, ContentType],
        topic: str,
        created_by: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Content":
        return cls(
            id=id,
            title=title,
            description=description,
            type=type if isinstance(type, ContentType) else ContentType(type),
            topic=topic,
            created_by=created_by,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> ContentId:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def type(self) -> ContentType:
        return self._type

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_information(
        self,
        title: str,
        description: Optional[str],
        topic: str,
    ) -> None:
        title = _validate_title(title)
        description = _clean_description(description)
        topic = _require_text("topic", topic, "Topic")

        self._title = title
        self._description = description
        self._topic = topic
        self._updated_at = advance(self._updated_at)

    def change_type(self, new_type: Union[str, ContentType]) -> None:
        self._type = ContentType.parse(new_type)
        self._updated_at = advance(self._updated_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Content(id={self._id.value}, title={self._title!r})"
