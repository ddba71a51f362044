"""Email address of a LearnHub user.

Addresses are compared and stored in lower case, so ``Ann@X.com`` and
``ann@x.com`` name the same account.
"""

import re
from dataclasses import dataclass
from typing import Any

from learnhub_identity.domain.user.exceptions import InvalidEmailError

# local@domain.tld, no whitespace
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def normalize_email(raw: Any) -> str:
    """Trim and lower-case ``raw``; raise ``InvalidEmailError`` if malformed."""
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidEmailError("Email cannot be empty")

    candidate = raw.strip().lower()
    if EMAIL_PATTERN.fullmatch(candidate) is None:
        raise InvalidEmailError(f"Invalid email format: {raw}", raw)
    return candidate


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", normalize_email(self.value))

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value
