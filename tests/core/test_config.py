"""Unit tests for src/core/config.py"""

import pytest

from src.core.config import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["TICTACTOE_HOST", "TICTACTOE_PORT", "TICTACTOE_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env() == Settings(DEFAULT_HOST, DEFAULT_PORT, DEFAULT_LOG_LEVEL)


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICTACTOE_HOST", "0.0.0.0")
    monkeypatch.setenv("TICTACTOE_PORT", "8080")
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")
    assert Settings.from_env() == Settings(host="0.0.0.0", port=8080, log_level="DEBUG")


def test_port_must_be_a_number(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICTACTOE_PORT", "eighty")
    with pytest.raises(ValueError):
        Settings.from_env()
