"""Category aggregate."""

from datetime import datetime
from typing import Any, Optional

from learnhub.domain.content.value_objects import CategoryId
from learnhub.domain.shared.exceptions import FieldValidationError
from learnhub.domain.shared.time import advance, utc_now

MAX_NAME_LENGTH = 100


def _validate_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = "Category name cannot be empty"
        raise FieldValidationError("name", msg)
    value = value.strip()
    if len(value) > MAX_NAME_LENGTH:
        msg = f"Category name cannot exceed {MAX_NAME_LENGTH} characters"
        raise FieldValidationError("name", msg)
    return value


class Category:
    """
    A topic that content is filed under.

    Content refers to a category by the string form of its id (the
    ``topic`` field); the reference is checked by the content domain
    service, not by this aggregate.
    """

    def __init__(
        self,
        id: CategoryId,
        name: str,
        description: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ):
        self._id = id
        self._name = name
        self._description = description
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(cls, name: str, description: Optional[str] = None) -> "Category":
        name = _validate_name(name)
        now = utc_now()
        return cls(
            id=CategoryId.generate(),
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(
        cls,
        id: CategoryId,
        name: str,
        description: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Category":
        return cls(
            id=id,
            name=name,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> CategoryId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_information(self, name: str, description: Optional[str]) -> None:
        self._name = _validate_name(name)
        self._description = description
        self._updated_at = advance(self._updated_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Category(id={self._id.value}, name={self._name!r})"
