"""
Unit tests for logging configuration.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from numberlist import log_config


@pytest.fixture
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []
    monkeypatch.setattr(log_config, "_LOGGING_CONFIGURED", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


def test_configure_logging_uses_settings_level(
    monkeypatch: pytest.MonkeyPatch, basic_config_calls: list[dict[str, Any]]
) -> None:
    monkeypatch.setenv("NUMBERLIST_LOG_LEVEL", "debug")
    log_config.configure_logging()
    assert len(basic_config_calls) == 1
    assert basic_config_calls[0]["level"] == logging.DEBUG
    assert "%(name)s" in basic_config_calls[0]["format"]


def test_configure_logging_runs_once(basic_config_calls: list[dict[str, Any]]) -> None:
    log_config.configure_logging()
    log_config.configure_logging()
    assert len(basic_config_calls) == 1


def test_configure_logging_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, basic_config_calls: list[dict[str, Any]]
) -> None:
    monkeypatch.setenv("NUMBERLIST_LOG_LEVEL", "chatty")
    log_config.configure_logging()
    assert basic_config_calls[0]["level"] == logging.INFO
