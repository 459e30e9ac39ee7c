"""Typed smoke tests for the settings loader.

These tests verify four guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
4) Out-of-range pacing values are refused at load time.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest
from pydantic import ValidationError

from recurviz.core.settings import Settings, get_logger, load_settings, settings


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_defaults_match_engine_constants(monkeypatch: Any) -> None:
    """Without overrides: 500 ms base delay, 64 memory slots, 1x speed."""
    for var in ("RECURVIZ_BASE_DELAY_MS", "RECURVIZ_MEMORY_SLOTS", "RECURVIZ_DEFAULT_SPEED"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.base_delay_ms == 500
    assert s.memory_slots == 64
    assert s.default_speed == 1.0


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("RECURVIZ_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("RECURVIZ_BASE_DELAY_MS", "120")

    load_settings.cache_clear()
    try:
        s = load_settings()
        assert s.environment == "test"
        assert s.log_level == "DEBUG"
        assert s.base_delay_ms == 120
    finally:
        load_settings.cache_clear()


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` should apply the numeric level derived from `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    load_settings.cache_clear()
    try:
        logger = get_logger("recurviz.tests.settings")
        assert logger.level == logging.ERROR
        assert logger.handlers, "Expected at least one StreamHandler to be attached."
    finally:
        load_settings.cache_clear()


def test_negative_delay_is_rejected(monkeypatch: Any) -> None:
    """A negative base delay is a configuration error."""
    monkeypatch.setenv("RECURVIZ_BASE_DELAY_MS", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
