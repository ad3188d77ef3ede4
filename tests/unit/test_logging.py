"""Tests for logging setup."""

import pytest
import structlog

from tool_server.utils.logging import configure_logging


def test_logs_go_to_stderr(capsys) -> None:
    """Test log lines never reach stdout."""
    configure_logging("INFO")
    structlog.get_logger().info("Registered tool", tool="wydln-get-user")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Registered tool" in captured.err
    assert "wydln-get-user" in captured.err


def test_level_filtering(capsys) -> None:
    configure_logging("warning")
    log = structlog.get_logger()
    log.info("hidden")
    log.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("LOUD")
