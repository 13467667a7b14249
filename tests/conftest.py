"""Test configuration ensuring the src package is importable."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


# ========== Known America/New_York transitions (2024) ==========

NEW_YORK = "America/New_York"
SPRING_FORWARD = datetime(2024, 3, 10, 7, 0, 0, tzinfo=timezone.utc)
FALL_BACK = datetime(2024, 11, 3, 6, 0, 0, tzinfo=timezone.utc)
EST = -5 * 3600
EDT = -4 * 3600


def unix_millis(instant: datetime) -> int:
    """Milliseconds since the epoch for a whole-second aware datetime."""
    return int(instant.timestamp()) * 1000


@pytest.fixture()
def counting_offsets(monkeypatch: pytest.MonkeyPatch):
    """Count oracle lookups made by the transition locator."""
    from tzclock import transitions

    calls: list[datetime] = []
    real_zone_offset = transitions.zone_offset

    def counted(zone, instant):
        calls.append(instant)
        return real_zone_offset(zone, instant)

    monkeypatch.setattr(transitions, "zone_offset", counted)
    return calls
