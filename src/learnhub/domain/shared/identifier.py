"""Base class for UUID-backed aggregate identifiers."""

from dataclasses import dataclass, field
from typing import ClassVar, TypeVar, Union
from uuid import UUID, uuid4

from learnhub.domain.shared.exceptions import InvalidFormatError

TIdentifier = TypeVar("TIdentifier", bound="Identifier")


@dataclass(frozen=True)
class Identifier:
    """Immutable identifier wrapping a UUID.

    Subclasses only set ``kind`` which is used in error messages. Equality
    and hashing compare the concrete class and the wrapped UUID, so a
    ``UserId`` never equals a ``ContentId`` with the same value.
    """

    value: UUID = field(default_factory=uuid4)

    kind: ClassVar[str] = "identifier"

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise InvalidFormatError(self.kind, self.value)

    @classmethod
    def generate(cls: type[TIdentifier]) -> TIdentifier:
        return cls(uuid4())

    @classmethod
    def from_string(cls: type[TIdentifier], raw: Union[str, UUID]) -> TIdentifier:
        """Parse an identifier from its string form.

        Raises
        ------
        InvalidFormatError
            If ``raw`` is not a well-formed UUID.
        """
        if isinstance(raw, UUID):
            return cls(raw)
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidFormatError(cls.kind, raw)
        try:
            return cls(UUID(raw.strip()))
        except ValueError as e:
            raise InvalidFormatError(cls.kind, raw) from e

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.value}')"
