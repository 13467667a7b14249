"""Service-wide constants and defaults."""

from __future__ import annotations

from datetime import timedelta

# ============================================================================
# Timezone Defaults
# ============================================================================

DEFAULT_TIMEZONE = "UTC"
TIMEZONE_HEADER = "X-Timezone"

# ============================================================================
# Transition Search
# ============================================================================

DEFAULT_HORIZON = timedelta(weeks=4)
DEFAULT_SCAN_WINDOW = timedelta(days=1)
SEARCH_RESOLUTION = timedelta(seconds=1)

# ============================================================================
# HTTP Server
# ============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

SERVICE_NAME = "tzclock"
SERVICE_VERSION = "1.0.0"

# Upper bound on windows scanned by a single /api/transitions request
MAX_SCAN_WINDOWS = 10_000
