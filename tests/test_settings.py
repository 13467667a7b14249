"""Tests for settings and environment variable helpers."""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from tzclock.constants import DEFAULT_HORIZON
from tzclock.errors import InvalidHorizonError, InvalidTimezoneError
from tzclock.settings import Settings
from tzclock.utils.env import get_env_bool, get_env_int, get_env_optional_int, get_env_str


def test_defaults_from_empty_environment():
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings.from_env()
    assert settings.default_timezone == "UTC"
    assert settings.horizon == DEFAULT_HORIZON == timedelta(weeks=4)
    assert settings.override_now is None
    assert settings.port == 8080


def test_override_current_time():
    with patch.dict(os.environ, {"TZCLOCK_OVERRIDE_CURRENT_TIME": "1710054000"}, clear=True):
        settings = Settings.from_env()
    expected = datetime(2024, 3, 10, 7, 0, tzinfo=timezone.utc)
    assert settings.override_now == expected
    assert settings.current_instant() == expected


def test_legacy_override_variable_is_an_alias():
    with patch.dict(os.environ, {"OVERRIDE_CURRENT_TIME": "0"}, clear=True):
        settings = Settings.from_env()
    assert settings.override_now == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_prefixed_override_wins_over_alias():
    env = {"TZCLOCK_OVERRIDE_CURRENT_TIME": "60", "OVERRIDE_CURRENT_TIME": "120"}
    with patch.dict(os.environ, env, clear=True):
        settings = Settings.from_env()
    assert settings.override_now == datetime(1970, 1, 1, 0, 1, tzinfo=timezone.utc)


def test_invalid_override_is_ignored():
    with patch.dict(os.environ, {"TZCLOCK_OVERRIDE_CURRENT_TIME": "soon"}, clear=True):
        settings = Settings.from_env()
    assert settings.override_now is None


def test_current_instant_without_override_is_wall_clock():
    before = datetime.now(timezone.utc)
    now = Settings().current_instant()
    after = datetime.now(timezone.utc)
    assert before <= now <= after
    assert now.tzinfo is not None


def test_horizon_and_timezone_from_env():
    env = {
        "TZCLOCK_HORIZON_SECONDS": "7200",
        "TZCLOCK_DEFAULT_TIMEZONE": "Europe/Berlin",
        "TZCLOCK_PORT": "9000",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = Settings.from_env()
    assert settings.horizon == timedelta(hours=2)
    assert settings.default_timezone == "Europe/Berlin"
    assert settings.port == 9000


def test_non_positive_horizon_is_rejected():
    with pytest.raises(InvalidHorizonError):
        Settings(horizon=timedelta(0))
    with patch.dict(os.environ, {"TZCLOCK_HORIZON_SECONDS": "-1"}, clear=True):
        with pytest.raises(InvalidHorizonError):
            Settings.from_env()


def test_out_of_range_override_is_ignored():
    env = {"TZCLOCK_OVERRIDE_CURRENT_TIME": "99999999999999"}
    with patch.dict(os.environ, env, clear=True), patch("tzclock.settings.logger") as mock_logger:
        settings = Settings.from_env()
    assert settings.override_now is None
    mock_logger.warning.assert_called_once()


def test_out_of_range_horizon_is_rejected():
    with patch.dict(os.environ, {"TZCLOCK_HORIZON_SECONDS": "999999999999999999"}, clear=True):
        with pytest.raises(InvalidHorizonError) as excinfo:
            Settings.from_env()
    assert isinstance(excinfo.value.cause, OverflowError)
    assert excinfo.value.details == {"horizon": 999999999999999999}


def test_unknown_default_timezone_is_rejected():
    with pytest.raises(InvalidTimezoneError):
        Settings(default_timezone="Nowhere/Special")


# ========== Environment helpers ==========


def test_get_env_bool():
    with patch.dict(os.environ, {"FLAG": "yes", "OFF": "0", "JUNK": "maybe", "BLANK": " "}):
        assert get_env_bool("FLAG", False) is True
        assert get_env_bool("OFF", True) is False
        assert get_env_bool("JUNK", True) is True
        assert get_env_bool("BLANK", False) is False
    with patch.dict(os.environ, {}, clear=True):
        assert get_env_bool("FLAG", True) is True


def test_get_env_int_invalid_falls_back():
    with patch.dict(os.environ, {"NUM": "abc"}), patch("tzclock.utils.env.logger") as mock_logger:
        assert get_env_int("NUM", 7) == 7
    mock_logger.warning.assert_called_once()


def test_get_env_optional_int_skips_blank():
    with patch.dict(os.environ, {"A": "", "B": "42"}, clear=True):
        assert get_env_optional_int("A", "B") == 42
        assert get_env_optional_int("A") is None


def test_get_env_str_strips_and_defaults():
    with patch.dict(os.environ, {"S": "  Asia/Tokyo  ", "E": ""}):
        assert get_env_str("S", "UTC") == "Asia/Tokyo"
        assert get_env_str("E", "UTC") == "UTC"
