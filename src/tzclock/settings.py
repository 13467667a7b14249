"""Service settings.

Settings are read from the environment once, at startup, and handed to
``create_app`` explicitly. Request handlers only ever see the ``Settings``
instance stored on ``app.state``; nothing re-reads the environment per request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .constants import (
    DEFAULT_HORIZON,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEZONE,
)
from .errors import InvalidHorizonError
from .oracle import resolve_zone
from .utils.env import get_env_int, get_env_optional_int, get_env_str
from .utils.time import from_unix_seconds, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the time service."""

    default_timezone: str = DEFAULT_TIMEZONE
    horizon: timedelta = DEFAULT_HORIZON
    override_now: Optional[datetime] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if self.horizon <= timedelta(0):
            raise InvalidHorizonError(self.horizon)
        resolve_zone(self.default_timezone)

    def current_instant(self) -> datetime:
        """Return the configured fixed instant, or the wall clock in UTC."""
        if self.override_now is not None:
            return self.override_now
        return utc_now()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``TZCLOCK_*`` environment variables.

        ``OVERRIDE_CURRENT_TIME`` is honoured as an alias for
        ``TZCLOCK_OVERRIDE_CURRENT_TIME``; both hold Unix seconds.
        """
        override_seconds = get_env_optional_int(
            "TZCLOCK_OVERRIDE_CURRENT_TIME",
            "OVERRIDE_CURRENT_TIME",
        )
        override_now = None
        if override_seconds is not None:
            try:
                override_now = from_unix_seconds(override_seconds)
            except OverflowError:
                logger.warning(f"Ignoring out-of-range current time override: {override_seconds}")
            else:
                logger.info(f"Current time fixed to {override_now.isoformat()}")

        horizon_seconds = get_env_int(
            "TZCLOCK_HORIZON_SECONDS",
            int(DEFAULT_HORIZON.total_seconds()),
        )

        try:
            horizon = timedelta(seconds=horizon_seconds)
        except OverflowError as exc:
            raise InvalidHorizonError(horizon_seconds, cause=exc) from exc

        return cls(
            default_timezone=get_env_str("TZCLOCK_DEFAULT_TIMEZONE", DEFAULT_TIMEZONE),
            horizon=horizon,
            override_now=override_now,
            host=get_env_str("TZCLOCK_HOST", DEFAULT_HOST),
            port=get_env_int("TZCLOCK_PORT", DEFAULT_PORT),
        )
