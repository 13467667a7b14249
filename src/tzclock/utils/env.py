"""Environment variable utilities."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def get_env_str(name: str, default: str) -> str:
    """Get string environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found or blank

    Returns:
        Stripped value from environment or default
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def get_env_bool(name: str, default: bool) -> bool:
    """Get boolean environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found

    Returns:
        Boolean value from environment or default
    """
    raw = os.getenv(name)
    if raw is None:
        return default

    s = raw.strip()
    if s == "":
        return default

    lowered = s.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False

    try:
        return bool(int(s))
    except ValueError:
        return default


def get_env_int(name: str, default: int) -> int:
    """Get integer environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found or invalid

    Returns:
        Integer value from environment or default
    """
    raw = os.getenv(name)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer value for {name}: '{raw}'. Using default: {default}")
        return default


def get_env_optional_int(*names: str) -> Optional[int]:
    """Get the first set integer among several environment variable names.

    Blank or unparsable values are skipped (with a warning for the latter).

    Returns:
        Integer value, or None when none of the variables holds one
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None or raw.strip() == "":
            continue
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(f"Ignoring invalid integer value for {name}: '{raw}'")
    return None
