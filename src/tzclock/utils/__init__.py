"""Utility package for general-purpose helpers.

Provides environment configuration and instant helpers.
"""

from .env import get_env_bool, get_env_int, get_env_optional_int, get_env_str
from .time import ensure_utc, from_unix_seconds, parse_instant, to_unix_millis, truncate_to_second, utc_now

__all__ = [
    # Environment utilities
    "get_env_bool",
    "get_env_int",
    "get_env_optional_int",
    "get_env_str",
    # Time utilities
    "ensure_utc",
    "from_unix_seconds",
    "parse_instant",
    "to_unix_millis",
    "truncate_to_second",
    "utc_now",
]
