from __future__ import annotations

import logging

import pytest

from arkad.utils.logging import (
    apply_debug_preference,
    configure_root,
    env_forces_debug,
    env_level,
    parse_level,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("ARKAD_LOG_LEVEL", "ARKAD_DEBUG", "ARKAD_DEBUG_LOGGING"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_env_level_overrides_default(monkeypatch) -> None:
    monkeypatch.setenv("ARKAD_LOG_LEVEL", "warning")
    assert configure_root(logging.INFO) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch) -> None:
    monkeypatch.setenv("ARKAD_DEBUG", "yes")
    assert env_forces_debug() is True
    assert apply_debug_preference(False) == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.INFO


def test_preferences_apply_without_env_override() -> None:
    assert env_forces_debug() is False
    assert apply_debug_preference(True) == logging.DEBUG
    assert apply_debug_preference(False) == logging.INFO


def test_unknown_level_name_falls_back() -> None:
    assert configure_root("chatty") == logging.INFO


@pytest.mark.parametrize(
    "value, expected",
    [("debug", logging.DEBUG), (" 25 ", 25), (logging.ERROR, logging.ERROR), ("", logging.INFO), (None, logging.INFO)],
)
def test_parse_level(value, expected) -> None:
    assert parse_level(value) == expected


def test_explicit_level_wins_over_debug_flag() -> None:
    env = {"ARKAD_LOG_LEVEL": "error", "ARKAD_DEBUG_LOGGING": "1"}
    assert env_level(env) == logging.ERROR
    assert env_forces_debug(env) is False
    assert env_level({}) is None
