from __future__ import annotations

import logging

import pytest

from common.env import env_float, env_int, env_str
from common.logging import setup_default_logging
from common.settings import get, reload_from_env


def test_env_helpers_parse_and_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MBL_T_INT", "7")
    monkeypatch.setenv("MBL_T_BAD", "x")
    monkeypatch.setenv("MBL_T_FLOAT", "2.5")
    monkeypatch.setenv("MBL_T_BLANK", "   ")
    assert env_int("MBL_T_INT") == 7
    assert env_int("MBL_T_INT", min_value=10) == 10
    assert env_int("MBL_T_BAD", 3) == 3
    assert env_float("MBL_T_FLOAT", max_value=1.0) == 1.0
    assert env_str("MBL_T_BLANK", "d") == "d"
    assert env_str("MBL_T_MISSING") is None


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MBL_SEED", "42")
    monkeypatch.setenv("MBL_RENDER_SCALE", "0.5")
    monkeypatch.setenv("MBL_LOG_LEVEL", "debug")
    reload_from_env()
    s = get()
    assert s.SEED == 42
    assert s.RENDER_SCALE == 0.5
    assert s.LOG_LEVEL == "DEBUG"


def test_settings_ignore_non_positive_render_scale(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MBL_RENDER_SCALE", "0")
    reload_from_env()
    assert get().RENDER_SCALE is None


def test_setup_default_logging_respects_existing_handlers() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        setup_default_logging("DEBUG")
        assert root.handlers == before + [handler]
    finally:
        root.removeHandler(handler)
