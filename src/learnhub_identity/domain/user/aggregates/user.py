"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Any, Union

from learnhub.domain.shared.exceptions import FieldValidationError
from learnhub.domain.shared.time import advance, utc_now
from learnhub_identity.domain.user.value_objects.email import Email
from learnhub_identity.domain.user.value_objects.user_id import UserId

MAX_NAME_LENGTH = 50
MIN_AGE = 0
MAX_AGE = 150


def _validate_name(field: str, value: Any) -> str:
    label = field.replace("_", " ").capitalize()
    if not isinstance(value, str) or not value.strip():
        msg = f"{label} cannot be empty"
        raise FieldValidationError(field, msg)
    value = value.strip()
    if len(value) > MAX_NAME_LENGTH:
        msg = f"{label} cannot exceed {MAX_NAME_LENGTH} characters"
        raise FieldValidationError(field, msg)
    return value


def _validate_age(value: Any) -> int:
    # bool is an int subclass and must not pass as an age
    if isinstance(value, bool) or not isinstance(value, int):
        msg = "Age must be an integer"
        raise FieldValidationError("age", msg)
    if not MIN_AGE <= value <= MAX_AGE:
        msg = f"Age must be between {MIN_AGE} and {MAX_AGE}"
        raise FieldValidationError("age", msg)
    return value


def _validate_email(value: Any) -> Email:
    if isinstance(value, Email):
        return value
    if value is None:
        msg = "Email cannot be null"
        raise FieldValidationError("email", msg)
    return Email(value)


class User:
    """
    User aggregate root.

    Holds the profile of a learner or author. Users are soft-deleted through
    ``deactivate()``; removing the record is left to the repository.
    """

    def __init__(  # NOQA: PLR0913
        self,
        id: UserId,
        first_name: str,
        last_name: str,
        email: Email,
        age: int,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ):
        self._id = id
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._age = age
        self._is_active = is_active
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        age: int,
    ) -> "User":
        """
        Create a new, active user.

        Fields are validated in declaration order and the first failure is
        raised as a ``FieldValidationError`` naming the field.

        Parameters
        ----------
        first_name
            Given name, non-blank, at most 50 characters after trimming
        last_name
            Family name, non-blank, at most 50 characters after trimming
        email
            Email address (raw string or ``Email``)
        age
            Age in years, 0 to 150
        """
        first_name = _validate_name("first_name", first_name)
        last_name = _validate_name("last_name", last_name)
        email_obj = _validate_email(email)
        age = _validate_age(age)

        now = utc_now()
        return cls(
            id=UserId.generate(),
            first_name=first_name,
            last_name=last_name,
            email=email_obj,
            age=age,
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UserId,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        age: int,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            email=email if isinstance(email, Email) else Email(email),
            age=age,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UserId:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> Email:
        return self._email

    @property
    def age(self) -> int:
        return self._age

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_information(
        self,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        age: int,
    ) -> None:
        """Replace the profile fields after validating all of them."""
        first_name = _validate_name("first_name", first_name)
        last_name = _validate_name("last_name", last_name)
        email_obj = _validate_email(email)
        age = _validate_age(age)

        self._first_name = first_name
        self._last_name = last_name
        self._email = email_obj
        self._age = age
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def _touch(self) -> None:
        self._updated_at = advance(self._updated_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id.value}, email={self._email.value})"
