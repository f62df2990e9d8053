"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config import API_BASE, Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test away from any real .env file."""
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = Settings()

    assert settings.API_BASE_URL == API_BASE
    assert settings.REQUEST_TIMEOUT_SECONDS == 30.0
    assert settings.RATE_LIMIT_SAFETY_BUFFER == 5
    assert settings.RATE_LIMIT_MAX_RETRIES == 10
    assert settings.effective_log_level == "INFO"
    assert settings.LOG_FORMAT == "console"


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRELLO_MCP_RATE_LIMIT_MAX_RETRIES", "0")
    monkeypatch.setenv("TRELLO_MCP_LOG_FORMAT", "json")
    monkeypatch.setenv("TRELLO_MCP_REQUEST_TIMEOUT_SECONDS", "12.5")

    settings = Settings()

    assert settings.RATE_LIMIT_MAX_RETRIES == 0
    assert settings.LOG_FORMAT == "json"
    assert settings.REQUEST_TIMEOUT_SECONDS == 12.5


def test_reads_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TRELLO_MCP_RATE_LIMIT_SAFETY_BUFFER=2\n", encoding="utf-8")

    assert Settings().RATE_LIMIT_SAFETY_BUFFER == 2


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRELLO_MCP_DEBUG", "true")
    monkeypatch.setenv("TRELLO_MCP_LOG_LEVEL", "WARNING")

    assert Settings().effective_log_level == "DEBUG"


def test_rejects_negative_retry_ceiling(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRELLO_MCP_RATE_LIMIT_MAX_RETRIES", "-1")

    with pytest.raises(ValidationError):
        Settings()
