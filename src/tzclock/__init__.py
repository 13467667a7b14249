"""Report the current time and the next UTC-offset transition of a timezone."""

from .errors import ErrorCode, InvalidHorizonError, InvalidTimezoneError, TzClockError
from .oracle import is_valid_timezone, offset_at, resolve_zone
from .transitions import NOT_FOUND, Found, NotFound, TransitionResult, find_next_transition, find_transitions

__all__ = [
    # Errors
    "ErrorCode",
    "InvalidHorizonError",
    "InvalidTimezoneError",
    "TzClockError",
    # Offset oracle
    "is_valid_timezone",
    "offset_at",
    "resolve_zone",
    # Transition locator
    "NOT_FOUND",
    "Found",
    "NotFound",
    "TransitionResult",
    "find_next_transition",
    "find_transitions",
]
