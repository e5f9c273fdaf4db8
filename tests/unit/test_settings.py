"""
Unit tests for settings and logging setup.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

import logging

import pytest

from src.common import logging as logging_module
from src.common import settings as settings_module


def test_load_settings_success() -> None:
    settings_module.get_settings.cache_clear()
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME
    assert settings.LOG_LEVEL in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def test_load_settings_missing_required(monkeypatch: pytest.MonkeyPatch) -> None:
    settings_module.get_settings.cache_clear()
    monkeypatch.delenv("PROJECT_NAME", raising=False)
    with pytest.raises(RuntimeError, match="Missing required environment variables"):
        settings_module.load_settings(load_env=False)


def test_load_settings_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    assert settings_module.load_settings(load_env=False).LOG_LEVEL == "DEBUG"


def test_load_settings_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_configure_logging_runs_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_module, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_module.configure_logging()
    logging_module.configure_logging()

    assert len(calls) == 1
    assert calls[0]["format"] == "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
