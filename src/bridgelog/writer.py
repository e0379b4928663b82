# topmark:header:start
#
#   project      : BridgeLog
#   file         : writer.py
#   file_relpath : src/bridgelog/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Thread-safe diagnostic sink for console output crossing a runtime boundary.

A [`DiagnosticWriter`][bridgelog.writer.DiagnosticWriter] mirrors every message to
the console and appends it to ``dotnet-test-2.log`` so the output of an embedded
runtime survives for post-mortem inspection, even if the process dies abruptly.

File handle lifecycle:
    - The log is deleted if present, then opened once in append mode at
      construction time. It stays open for the lifetime of the writer.
    - Every write is flushed while holding the writer's lock.
    - Closing is deferred to interpreter teardown via ``weakref.finalize``; there
      is no explicit close. The eager flush is what makes the log durable.

Error policy:
    - Construction failures (stale file cannot be removed, log cannot be
      opened) raise ``OSError``.
    - A failing file write after construction is logged and re-raised as
      ``OSError``; the console copy has already been emitted at that point.
    - Characters the log or console encoding cannot represent (e.g. lone
      surrogates) are replaced with ``?``; they never fail a write.
"""

from __future__ import annotations

import sys
import threading
import weakref
from typing import TYPE_CHECKING, TextIO

import click

from bridgelog.classify import is_known_warning, tag_error_message
from bridgelog.config.logging import BridgelogLogger, get_logger
from bridgelog.config.model import WriterConfig
from bridgelog.config.paths import current_culture_name
from bridgelog.constants import CULTURE_PREFIX, INIT_MARKER

if TYPE_CHECKING:
    from pathlib import Path

logger: BridgelogLogger = get_logger(__name__)


class DiagnosticWriter:
    """Console + file sink for messages coming from another runtime.

    Args:
        config (WriterConfig | None): Writer configuration. When None it is
            assembled from the process environment with
            [`WriterConfig.from_environment`][bridgelog.config.model.WriterConfig.from_environment].
        out (TextIO | None): Console stream. When None, the current ``sys.stdout``
            is used at each write.

    Raises:
        OSError: If a stale log cannot be removed or the log cannot be opened.
    """

    config: WriterConfig

    def __init__(
        self,
        config: WriterConfig | None = None,
        *,
        out: TextIO | None = None,
    ) -> None:
        self.config = config if config is not None else WriterConfig.from_environment()
        self._out: TextIO | None = out
        self._lock = threading.Lock()

        path: Path = self.config.log_path
        # Each run starts with a clean slate.
        path.unlink(missing_ok=True)

        # Unencodable characters (lone surrogates) become "?" instead of failing the write.
        self._file: TextIO = path.open("a", encoding="utf-8", errors="replace")
        self._finalizer = weakref.finalize(self, self._file.close)

        self._file.write(INIT_MARKER + "\n")
        self._file.write(CULTURE_PREFIX + current_culture_name() + "\n")
        self._file.flush()

        logger.debug(
            "Diagnostic log opened at %s (suppress known warnings: %s)",
            path,
            self.config.suppress_known_warnings,
        )

    @property
    def log_path(self) -> Path:
        """Absolute path of the diagnostic log file."""
        return self.config.log_path

    @property
    def suppress_known_warnings(self) -> bool:
        """Construction-time suppression flag (advisory, never enforced here)."""
        return self.config.suppress_known_warnings

    def is_known_warning(self, message: str) -> bool:
        """Return whether ``message`` starts with one of the configured warning prefixes."""
        return is_known_warning(message, self.config.known_warning_prefixes)

    def format_message(self, message: str, is_error: bool) -> str:
        """Return ``message`` as it will be written: tagged if it is an error."""
        if not is_error:
            return message
        return tag_error_message(
            message,
            suppress=self.config.suppress_known_warnings,
            prefixes=self.config.known_warning_prefixes,
        )

    def write(self, message: str, is_error: bool) -> None:
        """Write ``message`` to the console and to the log file.

        Error-stream messages are tagged ``|ERR-<known>-<suppress>|: ``. The console
        copy ends with a newline; the file copy is written exactly as given and
        flushed before the lock is released.

        Args:
            message (str): The message to record.
            is_error (bool): Whether the message came from the error stream.

        Raises:
            OSError: If the log file cannot be written.
        """
        message = self.format_message(message, is_error)

        self._echo(message)

        with self._lock:
            try:
                self._file.write(message)
                self._file.flush()
            except (OSError, ValueError) as exc:
                logger.error("Failed to write to diagnostic log %s: %s", self.log_path, exc)
                if isinstance(exc, OSError):
                    raise
                # Writing to a closed handle surfaces as ValueError.
                raise OSError(f"Diagnostic log {self.log_path} is not writable: {exc}") from exc

    def _echo(self, message: str) -> None:
        # color=True keeps ANSI sequences from the other runtime intact.
        try:
            click.echo(message, file=self._out, color=True)
        except UnicodeEncodeError:
            stream: TextIO = self._out if self._out is not None else sys.stdout
            encoding: str = getattr(stream, "encoding", None) or "utf-8"
            safe: str = message.encode(encoding, "replace").decode(encoding)
            click.echo(safe, file=self._out, color=True)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(log_path={str(self.log_path)!r}, "
            f"suppress_known_warnings={self.suppress_known_warnings})"
        )
