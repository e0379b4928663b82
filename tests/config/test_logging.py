# topmark:header:start
#
#   project      : BridgeLog
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for BridgeLog's internal logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from bridgelog.config.logging import (
    TRACE_LEVEL,
    BridgelogLogger,
    DEBUG_LOG_FORMAT,
    LOG_FORMAT,
    ChalkFormatter,
    get_logger,
    log_format_for,
    resolve_env_log_level,
    setup_logging,
)
from bridgelog.constants import ENV_LOG_LEVEL


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch,
    value: str,
    expected: int | None,
) -> None:
    """Level names (any case) and numbers are honored; unknown names are ignored."""
    monkeypatch.setenv(ENV_LOG_LEVEL, value)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No variable means no level."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_bridgelog_logger() -> None:
    """Loggers created after import support `trace`."""
    logger = get_logger("bridgelog.tests.fresh_logger")

    assert isinstance(logger, BridgelogLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    """Colorizing never drops the formatted text."""
    formatter = ChalkFormatter("[%(levelname)s] %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "disk %s", ("full",), None)

    assert "[ERROR] disk full" in formatter.format(record)


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (TRACE_LEVEL, DEBUG_LOG_FORMAT),
        (logging.DEBUG, DEBUG_LOG_FORMAT),
        (logging.INFO, LOG_FORMAT),
        (logging.CRITICAL, LOG_FORMAT),
    ],
)
def test_thread_name_only_in_debug_formats(level: int, expected: str) -> None:
    """Only DEBUG and TRACE records carry the thread name."""
    assert log_format_for(level) == expected
    assert ("%(threadName)s" in log_format_for(level)) is (level <= logging.DEBUG)


def test_setup_logging_writes_to_given_stream() -> None:
    """Records go to the configured stream, tagged with the logger name."""
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    try:
        get_logger("bridgelog.tests.stream").info("pinned at %s", "/tmp/x")
        get_logger("bridgelog.tests.stream").debug("not shown")
    finally:
        setup_logging(TRACE_LEVEL)

    output = stream.getvalue()
    assert "[INFO] bridgelog.tests.stream: pinned at /tmp/x" in output
    assert "not shown" not in output


def test_setup_logging_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Internal records stay off stdout, which carries the mirrored messages."""
    setup_logging(logging.WARNING)
    try:
        get_logger("bridgelog.tests.stderr").warning("careful")
    finally:
        setup_logging(TRACE_LEVEL)

    captured = capsys.readouterr()
    assert "careful" in captured.err
    assert "careful" not in captured.out
