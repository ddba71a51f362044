"""User identifier value object."""

from dataclasses import dataclass

from learnhub.domain.shared.identifier import Identifier


@dataclass(frozen=True, repr=False)
class UserId(Identifier):
    """Identity of a User aggregate."""

    kind = "user id"
