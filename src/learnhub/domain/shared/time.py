"""Time utilities for the domain layer."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def advance(previous: datetime) -> datetime:
    """Return a fresh timestamp that is never earlier than ``previous``."""
    now = utc_now()
    previous = ensure_tz_aware(previous)
    return now if now >= previous else previous
