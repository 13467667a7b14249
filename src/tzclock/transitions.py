"""Locate the next UTC-offset transition of a timezone.

A zone's UTC offset, viewed as a function of time, is a step function. Given a
start instant and a horizon, :func:`find_next_transition` samples the offset at
both ends of the interval and, when they differ, bisects down to the exact
second at which the new offset first applies. No rule tables are parsed; the
oracle in :mod:`tzclock.oracle` is the only source of truth.

The bisection assumes a single step inside the interval. Two transitions that
cancel each other out (offset goes up then back down) before the end of the
horizon are not reported. :func:`find_transitions` narrows that blind spot by
running the search over consecutive windows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Union

from .constants import DEFAULT_SCAN_WINDOW, SEARCH_RESOLUTION
from .errors import InvalidHorizonError
from .oracle import resolve_zone, zone_offset
from .utils.time import truncate_to_second

OffsetFn = Callable[[datetime], int]


@dataclass(frozen=True, slots=True)
class NotFound:
    """No offset change between start and start + horizon."""

    found = False


@dataclass(frozen=True, slots=True)
class Found:
    """The offset changes to ``new_offset`` at ``instant`` (UTC, second-aligned)."""

    instant: datetime
    new_offset: int

    found = True


TransitionResult = Union[NotFound, Found]

NOT_FOUND = NotFound()


def _check_positive(duration: timedelta, name: str) -> None:
    if duration <= timedelta(0):
        raise InvalidHorizonError(duration, name=name)


def _bisect(offset_fn: OffsetFn, start: datetime, end: datetime) -> TransitionResult:
    """Search ``[start, end]`` (both second-aligned) for a single offset step."""
    if end - start < SEARCH_RESOLUTION:
        return NOT_FOUND

    start_offset = offset_fn(start)
    end_offset = offset_fn(end)
    if start_offset == end_offset:
        return NOT_FOUND
    return _locate(offset_fn, start, start_offset, end, end_offset)


def _locate(
    offset_fn: OffsetFn,
    start: datetime,
    start_offset: int,
    end: datetime,
    end_offset: int,
) -> Found:
    """Narrow ``[start, end]`` down to the second at which the offset changes."""
    # Invariant: offset_fn(start) == start_offset != end_offset == offset_fn(end)
    while end - start > SEARCH_RESOLUTION:
        half = (end - start) // SEARCH_RESOLUTION // 2
        mid = start + half * SEARCH_RESOLUTION
        mid_offset = offset_fn(mid)
        if mid_offset == start_offset:
            start = mid
        else:
            end, end_offset = mid, mid_offset

    return Found(instant=end, new_offset=end_offset)


def find_next_transition(
    timezone: str,
    start: datetime,
    horizon: timedelta,
) -> TransitionResult:
    """Find the first offset change for ``timezone`` in ``(start, start + horizon]``.

    Both bounds are truncated to whole seconds before searching, so a
    sub-second part of ``start`` never shifts the reported instant.

    Args:
        timezone: IANA timezone identifier
        start: Instant to search from; naive values are taken as UTC
        horizon: How far ahead of ``start`` to look

    Returns:
        ``Found(instant, new_offset)`` for the transition, where ``instant`` is
        the first second at which ``new_offset`` applies, or ``NOT_FOUND`` when
        the offsets at both ends of the horizon agree. A horizon that truncates
        to less than one second also yields ``NOT_FOUND``.

    Raises:
        InvalidTimezoneError: if ``timezone`` does not resolve
        InvalidHorizonError: if ``horizon`` is zero or negative
    """
    _check_positive(horizon, "horizon")
    zone = resolve_zone(timezone)

    end = truncate_to_second(start + horizon)
    start = truncate_to_second(start)

    return _bisect(lambda instant: zone_offset(zone, instant), start, end)


def find_transitions(
    timezone: str,
    start: datetime,
    horizon: timedelta,
    window: timedelta = DEFAULT_SCAN_WINDOW,
) -> List[Found]:
    """Find every offset change in ``(start, start + horizon]``.

    The horizon is split into consecutive windows of ``window`` length and each
    one is bisected independently, so transitions further apart than
    ``window`` are all reported in chronological order.

    Raises:
        InvalidTimezoneError: if ``timezone`` does not resolve
        InvalidHorizonError: if ``horizon`` or ``window`` is not positive
    """
    _check_positive(horizon, "horizon")
    _check_positive(window, "window")
    zone = resolve_zone(timezone)

    def offset_fn(instant: datetime) -> int:
        return zone_offset(zone, instant)

    end = truncate_to_second(start + horizon)
    cursor = truncate_to_second(start)
    # Windows shorter than the search resolution cannot advance the cursor
    step = max(window, SEARCH_RESOLUTION)

    results: List[Found] = []
    if cursor >= end:
        return results

    # Each window reuses the offset already known at its left bound
    cursor_offset = offset_fn(cursor)
    while cursor < end:
        window_end = min(truncate_to_second(cursor + step), end)
        window_end_offset = offset_fn(window_end)
        if window_end_offset != cursor_offset:
            results.append(_locate(offset_fn, cursor, cursor_offset, window_end, window_end_offset))
        cursor, cursor_offset = window_end, window_end_offset
    return results
