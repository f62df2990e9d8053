"""Tests for logging configuration."""

import json
from collections.abc import Iterator

import pytest
import structlog

from logging_utils import configure_logging, create_logger


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_logs_go_to_stderr_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    # Created before configuration, as module-level loggers are
    logger = create_logger("trello.test")
    configure_logging("INFO", "json")

    logger.info("Request sent", method="GET", path="/boards/b1")

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "Request sent"
    assert record["logger_name"] == "trello.test"
    assert record["level"] == "info"
    assert record["path"] == "/boards/b1"


def test_level_filters_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING", "console")
    logger = create_logger("trello.test")

    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
