"""Tests for structlog configuration."""

import json

import pytest
import structlog

from shared.log_config import configure_logging


@pytest.fixture
def restore_structlog():
    yield
    structlog.reset_defaults()


def test_logs_are_json_on_stderr(capsys, restore_structlog):
    configure_logging("INFO")

    structlog.get_logger().info("tool_call_started", provider="openai", tool="create_image")

    captured = capsys.readouterr()
    assert captured.out == ""
    line = json.loads(captured.err.strip().splitlines()[-1])
    assert line["event"] == "tool_call_started"
    assert line["level"] == "info"
    assert line["tool"] == "create_image"
    assert "timestamp" in line


def test_level_filtering(capsys, restore_structlog):
    configure_logging("warning")

    logger = structlog.get_logger()
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_unknown_level_falls_back_to_info(capsys, restore_structlog):
    configure_logging("LOUD")

    structlog.get_logger().info("visible")

    assert "visible" in capsys.readouterr().err
