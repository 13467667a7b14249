"""Offset oracle backed by the IANA timezone database.

The oracle answers one question: which UTC offset, in whole seconds, is in
effect for a named zone at a given instant. It is pure and reentrant;
``ZoneInfo`` keeps its own per-key instance cache so repeated lookups are cheap.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidTimezoneError
from .utils.time import ensure_utc


def resolve_zone(timezone: str) -> ZoneInfo:
    """Load the rule set for an IANA timezone identifier.

    Raises:
        InvalidTimezoneError: if the identifier is empty, malformed or unknown
    """
    if not timezone or not isinstance(timezone, str):
        raise InvalidTimezoneError(str(timezone))
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        # ValueError: keys zoneinfo refuses outright; OSError: directories such as "America"
        raise InvalidTimezoneError(timezone, cause=exc) from exc


def is_valid_timezone(timezone: str) -> bool:
    """Return True when ``timezone`` resolves to a known rule set."""
    try:
        resolve_zone(timezone)
    except InvalidTimezoneError:
        return False
    return True


def zone_offset(zone: ZoneInfo, instant: datetime) -> int:
    """UTC offset in seconds of an already resolved zone at ``instant``."""
    offset = ensure_utc(instant).astimezone(zone).utcoffset()
    if offset is None:
        return 0
    return int(offset.total_seconds())


def offset_at(timezone: str, instant: datetime) -> int:
    """UTC offset in seconds in effect for ``timezone`` at ``instant``.

    Args:
        timezone: IANA timezone identifier (e.g. "America/New_York")
        instant: Aware datetime; naive values are taken as UTC

    Returns:
        Seconds east of UTC (negative west of Greenwich)

    Raises:
        InvalidTimezoneError: if the identifier does not resolve
    """
    return zone_offset(resolve_zone(timezone), instant)
