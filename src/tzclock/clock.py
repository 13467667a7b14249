"""Current-time snapshots for a timezone.

A snapshot bundles what ``GET /time`` reports: the current instant, the offset
in effect now, and the next offset change within the search horizon.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from .oracle import offset_at
from .transitions import Found, find_next_transition
from .utils.time import ensure_utc, to_unix_millis


@dataclass(frozen=True, slots=True)
class TimeSnapshot:
    """Time and offset state of a zone at one instant."""

    now: datetime
    offset: int
    next_transition: Optional[Found]

    def as_list(self) -> List[Optional[int]]:
        """Wire form: ``[now_ms, offset_s, transition_ms, new_offset_s]``.

        Both transition fields are ``None`` (JSON ``null``) when no offset
        change lies within the horizon.
        """
        if self.next_transition is None:
            return [to_unix_millis(self.now), self.offset, None, None]
        return [
            to_unix_millis(self.now),
            self.offset,
            to_unix_millis(self.next_transition.instant),
            self.next_transition.new_offset,
        ]


def take_snapshot(timezone: str, now: datetime, horizon: timedelta) -> TimeSnapshot:
    """Build a snapshot for ``timezone`` at ``now``.

    Raises:
        InvalidTimezoneError: if ``timezone`` does not resolve
        InvalidHorizonError: if ``horizon`` is not positive
    """
    now = ensure_utc(now)
    offset = offset_at(timezone, now)
    result = find_next_transition(timezone, now, horizon)
    return TimeSnapshot(
        now=now,
        offset=offset,
        next_transition=result if isinstance(result, Found) else None,
    )
