"""Instant helpers shared by the oracle, the locator and the API layer.

All instants handled by tzclock are timezone-aware ``datetime`` objects.
Naive values are interpreted as UTC.
"""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(instant: datetime) -> datetime:
    """Return ``instant`` expressed in UTC, treating naive values as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def truncate_to_second(instant: datetime) -> datetime:
    """Drop the sub-second part of ``instant`` (always rounds toward the past)."""
    return ensure_utc(instant).replace(microsecond=0)


def utc_now() -> datetime:
    """Current wall-clock instant in UTC."""
    return datetime.now(timezone.utc)


def from_unix_seconds(seconds: int) -> datetime:
    """Build a UTC instant from a Unix timestamp in seconds."""
    return EPOCH + timedelta(seconds=seconds)


def to_unix_millis(instant: datetime) -> int:
    """Milliseconds since the Unix epoch, floored to the millisecond."""
    return (ensure_utc(instant) - EPOCH) // timedelta(milliseconds=1)


def parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 timestamp (``Z`` suffix accepted) into a UTC instant.

    Raises:
        ValueError: if ``value`` is not a valid ISO 8601 timestamp
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))
