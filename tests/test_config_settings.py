"""
Tests for math_utilities/config/settings.py
"""

import logging

import pytest

from math_utilities.config.settings import (
    Settings,
    configure_logging,
    get_settings,
    reset_settings,
)


def test_defaults_without_environment():
    """With no variables set, defaults match the historical behaviour."""
    settings = Settings.from_env()

    assert settings.sort_in_place is True
    assert settings.empty_range == "raise"
    assert settings.log_level == "WARNING"


def test_from_env_reads_variables(monkeypatch):
    """Variables are read, trimmed and case-normalized."""
    monkeypatch.setenv("MATH_UTILITIES_SORT_IN_PLACE", " No ")
    monkeypatch.setenv("MATH_UTILITIES_EMPTY_RANGE", "NaN")
    monkeypatch.setenv("MATH_UTILITIES_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.sort_in_place is False
    assert settings.empty_range == "nan"
    assert settings.log_level == "DEBUG"


def test_from_env_rejects_bad_bool(monkeypatch):
    """An unparseable boolean names the variable in the error."""
    monkeypatch.setenv("MATH_UTILITIES_SORT_IN_PLACE", "maybe")

    with pytest.raises(ValueError, match="MATH_UTILITIES_SORT_IN_PLACE"):
        Settings.from_env()


def test_rejects_unknown_empty_range_policy():
    """Only 'raise' and 'nan' are valid policies."""
    with pytest.raises(ValueError, match="MATH_UTILITIES_EMPTY_RANGE"):
        Settings(empty_range="zero")


def test_rejects_unknown_log_level():
    """Log level must be a standard level name."""
    with pytest.raises(ValueError, match="MATH_UTILITIES_LOG_LEVEL"):
        Settings(log_level="LOUD")


def test_get_settings_is_cached(monkeypatch):
    """get_settings returns the same object until reset_settings is called."""
    first = get_settings()
    monkeypatch.setenv("MATH_UTILITIES_EMPTY_RANGE", "nan")

    assert get_settings() is first

    reset_settings()
    assert get_settings().empty_range == "nan"


def test_settings_are_frozen():
    """Settings cannot be changed after creation."""
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.sort_in_place = False


def test_configure_logging_uses_level(monkeypatch):
    """configure_logging forwards the configured level to basicConfig."""
    calls = {}

    def fake_basic_config(**kwargs):
        calls.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    configure_logging(Settings(log_level="INFO"))

    assert calls["level"] == logging.INFO
    assert "%(levelname)s" in calls["format"]
