"""Error types and constants for consistent error handling across the service."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Optional, Union


class ErrorCode(str, Enum):
    """Standardized error codes for consistent error handling."""

    # Input errors
    INVALID_TIMEZONE = "invalid_timezone"
    INVALID_HORIZON = "invalid_horizon"


class TzClockError(Exception):
    """Base exception class for tzclock errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize the error.

        Args:
            code: Error code identifier
            message: Human-readable error message
            details: Additional error context and data
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidTimezoneError(TzClockError):
    """Raised when a timezone identifier does not resolve to a known rule set."""

    def __init__(self, timezone: str, cause: Optional[Exception] = None):
        """Initialize invalid timezone error.

        Args:
            timezone: The identifier that failed to resolve
            cause: Lookup exception raised by zoneinfo
        """
        super().__init__(
            ErrorCode.INVALID_TIMEZONE,
            f"Invalid timezone: {timezone!r}",
            details={"timezone": timezone},
            cause=cause,
        )
        self.timezone = timezone


class InvalidHorizonError(TzClockError):
    """Raised when a search horizon or window is not a positive duration."""

    def __init__(
        self,
        horizon: Union[timedelta, int],
        name: str = "horizon",
        cause: Optional[Exception] = None,
    ):
        """Initialize invalid horizon error.

        Args:
            horizon: The rejected duration, or its length in seconds when it
                does not fit in a ``timedelta``
            name: Which parameter carried it ("horizon" or "window")
            cause: Original exception, e.g. an OverflowError
        """
        seconds = horizon.total_seconds() if isinstance(horizon, timedelta) else horizon
        reason = "out of range" if cause is not None else "not positive"
        super().__init__(
            ErrorCode.INVALID_HORIZON,
            f"Search {name} is {reason}: {seconds}s",
            details={name: seconds},
            cause=cause,
        )
        self.horizon = horizon
