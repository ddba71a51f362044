"""Content identifier value object."""

from dataclasses import dataclass

from learnhub.domain.shared.identifier import Identifier


@dataclass(frozen=True, repr=False)
class ContentId(Identifier):
    """Identity of a Content aggregate."""

    kind = "content id"
