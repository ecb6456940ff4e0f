from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_float, env_int, env_str
from common.logging import setup_default_logging


def test_env_helpers_fall_back_on_missing_or_malformed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HCT_TEST_VALUE", raising=False)
    assert env_int("HCT_TEST_VALUE", 7) == 7
    assert env_float("HCT_TEST_VALUE", 1.5) == 1.5
    assert env_str("HCT_TEST_VALUE", "x") == "x"
    assert env_bool("HCT_TEST_VALUE", True) is True

    monkeypatch.setenv("HCT_TEST_VALUE", "abc")
    assert env_int("HCT_TEST_VALUE", 7) == 7
    assert env_float("HCT_TEST_VALUE", 1.5) == 1.5
    assert env_bool("HCT_TEST_VALUE", False) is False


def test_env_int_parses_hex_and_applies_minimum(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HCT_TEST_VALUE", "0x10")
    assert env_int("HCT_TEST_VALUE", 0) == 16
    monkeypatch.setenv("HCT_TEST_VALUE", "-3")
    assert env_int("HCT_TEST_VALUE", 0, min_value=1) == 1


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("0", False), ("yes", True), ("off", False), ("TRUE", True)],
)
def test_env_bool_accepts_common_spellings(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("HCT_TEST_VALUE", raw)
    assert env_bool("HCT_TEST_VALUE", not expected) is expected


def test_settings_defaults(fresh_settings: pytest.MonkeyPatch) -> None:
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.WSMEANS_MAX_ITERATIONS == 10
    assert cfg.WSMEANS_SEED == 0x42688
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.DEBUG_SOLVER is False


def test_settings_reload_reads_environment(fresh_settings: pytest.MonkeyPatch) -> None:
    fresh_settings.setenv("HCT_WSMEANS_MAX_ITERATIONS", "0")
    fresh_settings.setenv("HCT_WSMEANS_SEED", "42")
    fresh_settings.setenv("HCT_LOG_LEVEL", "DEBUG")
    fresh_settings.setenv("HCT_DEBUG_SOLVER", "1")
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.WSMEANS_MAX_ITERATIONS == 1
    assert cfg.WSMEANS_SEED == 42
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.DEBUG_SOLVER is True


def test_setup_default_logging_is_noop_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    level_before = root.level
    setup_default_logging("DEBUG")
    assert root.handlers == [handler]
    assert root.level == level_before
