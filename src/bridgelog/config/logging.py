# topmark:header:start
#
#   project      : BridgeLog
#   file         : logging.py
#   file_relpath : src/bridgelog/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog's own diagnostics: TRACE level, colored records, env-driven level.

This covers what the writer and the bridge are doing, never the messages a
[`DiagnosticWriter`][bridgelog.writer.DiagnosticWriter] captures. Those are
mirrored to stdout, so internal records go to stderr and the two streams never
interleave. Records at DEBUG and below also carry the thread name.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from bridgelog.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class BridgelogLogger(logging.Logger):
    """Custom logger class for BridgeLog with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(BridgelogLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s: %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(threadName)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"
)

# Highest threshold first; anything below TRACE falls through to the last style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with yachalk."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message.
        """
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors BRIDGELOG_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(ENV_LOG_LEVEL)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def log_format_for(level: int) -> str:
    """Return the record format for ``level``: thread-aware at DEBUG and below."""
    return LOG_FORMAT if level > logging.DEBUG else DEBUG_LOG_FORMAT


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Route BridgeLog's records through one colored handler on the root logger.

    Args:
        level (int | None): Threshold. When None, ``BRIDGELOG_LOG_LEVEL`` is
            consulted via
            [`resolve_env_log_level`][bridgelog.config.logging.resolve_env_log_level];
            CRITICAL when that is unset too.
        stream (TextIO | None): Destination. Defaults to the current ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace, never stack, handlers across repeated setup.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ChalkFormatter(log_format_for(level)))
    root_logger.addHandler(handler)


def get_logger(name: str) -> BridgelogLogger:
    """Retrieve a BridgelogLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        BridgelogLogger: A BridgelogLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("BridgelogLogger", logger)
