"""Category identifier value object."""

from dataclasses import dataclass

from learnhub.domain.shared.identifier import Identifier


@dataclass(frozen=True, repr=False)
class CategoryId(Identifier):
    """Identity of a Category aggregate.

    ``Content.topic`` stores the string form of this id.
    """

    kind = "category id"
