"""Unified logging configuration for the tzclock service.

All log entries, from the application and from uvicorn, share one format with
timestamps.

Usage:
    At application startup:
    >>> from tzclock.logging_config import configure_logging
    >>> configure_logging()

    When starting uvicorn:
    >>> from tzclock.logging_config import get_uvicorn_log_config
    >>> uvicorn.run(app, log_config=get_uvicorn_log_config())

Configuration:
    - Log level: TZCLOCK_LOG_LEVEL environment variable (default: INFO)
    - Access log: TZCLOCK_VERBOSE_LOGGING shows uvicorn access lines at the
      configured level; otherwise only warnings are shown
    - Format: "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
    - Date format: "%Y-%m-%d %H:%M:%S"
"""

import logging
import logging.config
import os
from typing import Any, Dict

from .utils.env import get_env_bool

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_level() -> str:
    """Get the log level from environment variable with fallback."""
    return (os.getenv("TZCLOCK_LOG_LEVEL", "INFO") or "INFO").upper()


def get_logging_config() -> Dict[str, Any]:
    """Generate a unified logging configuration dictionary."""
    log_level = get_log_level()
    verbose_logging = get_env_bool("TZCLOCK_VERBOSE_LOGGING", False)
    access_log_level = log_level if verbose_logging else "WARNING"

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
            "access": {
                "format": LOG_FORMAT,
                "datefmt": DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
            "access": {
                "formatter": "access",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access"],
                "level": access_log_level,
                "propagate": False,
            },
            "tzclock": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["default"],
        },
    }


def configure_logging() -> None:
    """Configure logging for the entire application.

    Call once at startup, before any other logging configuration.
    """
    logging.config.dictConfig(get_logging_config())


def get_uvicorn_log_config() -> Dict[str, Any]:
    """Get uvicorn-specific log configuration (same as the application's)."""
    return get_logging_config()
