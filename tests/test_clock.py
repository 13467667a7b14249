"""Tests for time snapshots and instant helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import EDT, EST, NEW_YORK, SPRING_FORWARD, unix_millis
from tzclock.clock import take_snapshot
from tzclock.errors import InvalidTimezoneError
from tzclock.transitions import Found
from tzclock.utils.time import from_unix_seconds, parse_instant, to_unix_millis, truncate_to_second


def test_snapshot_with_transition():
    now = SPRING_FORWARD - timedelta(minutes=1, milliseconds=250)
    snapshot = take_snapshot(NEW_YORK, now, timedelta(weeks=4))

    assert snapshot.offset == EST
    assert snapshot.next_transition == Found(SPRING_FORWARD, EDT)
    assert snapshot.as_list() == [
        unix_millis(SPRING_FORWARD) - 60_250,
        EST,
        unix_millis(SPRING_FORWARD),
        EDT,
    ]


def test_snapshot_without_transition_uses_nulls():
    now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    snapshot = take_snapshot("UTC", now, timedelta(weeks=4))
    assert snapshot.next_transition is None
    assert snapshot.as_list() == [unix_millis(now), 0, None, None]


def test_snapshot_invalid_timezone():
    with pytest.raises(InvalidTimezoneError):
        take_snapshot("Nowhere/Special", SPRING_FORWARD, timedelta(hours=2))


def test_truncate_to_second_floors():
    instant = datetime(2024, 1, 1, 0, 0, 59, 999_999, tzinfo=timezone.utc)
    assert truncate_to_second(instant) == datetime(2024, 1, 1, 0, 0, 59, tzinfo=timezone.utc)


def test_truncate_to_second_before_epoch():
    instant = datetime(1969, 12, 31, 23, 59, 59, 500_000, tzinfo=timezone.utc)
    assert truncate_to_second(instant) == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_unix_conversions():
    assert from_unix_seconds(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert to_unix_millis(from_unix_seconds(1710054000)) == 1710054000000
    assert to_unix_millis(datetime(1970, 1, 1, 0, 0, 0, 1500, tzinfo=timezone.utc)) == 1


@pytest.mark.parametrize(
    "text",
    ["2024-03-10T07:00:00Z", "2024-03-10T07:00:00+00:00", "2024-03-10T02:00:00-05:00"],
)
def test_parse_instant(text):
    assert parse_instant(text) == SPRING_FORWARD


def test_parse_instant_naive_is_utc():
    assert parse_instant("2024-03-10T07:00:00") == SPRING_FORWARD


def test_parse_instant_rejects_garbage():
    with pytest.raises(ValueError):
        parse_instant("yesterday")
