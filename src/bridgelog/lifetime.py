# topmark:header:start
#
#   project      : BridgeLog
#   file         : lifetime.py
#   file_relpath : src/bridgelog/lifetime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide pinned writer.

The diagnostic writer is called sporadically from the other side of a process
boundary, sometimes minutes apart. Reference-counted or lease-based object
lifetimes on that boundary would reclaim it between calls, so the writer is held
here instead: created once, explicitly, and kept until the interpreter exits.
There is no TTL, no lease and no teardown API.

Usage:
    ```python
    from bridgelog.lifetime import get_writer

    get_writer().write("hello from the JVM\\n", False)
    ```
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from bridgelog.config.logging import BridgelogLogger, get_logger
from bridgelog.writer import DiagnosticWriter

if TYPE_CHECKING:
    from typing import TextIO

    from bridgelog.config.model import WriterConfig

logger: BridgelogLogger = get_logger(__name__)


class _PinnedWriter:
    """Holder that owns the single writer instance of this process."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._writer: DiagnosticWriter | None = None

    @property
    def writer(self) -> DiagnosticWriter | None:
        return self._writer

    def initialize(
        self,
        config: WriterConfig | None = None,
        *,
        out: TextIO | None = None,
    ) -> DiagnosticWriter:
        with self._lock:
            if self._writer is None:
                self._writer = DiagnosticWriter(config, out=out)
                logger.info("Pinned diagnostic writer at %s", self._writer.log_path)
            elif config is not None and config != self._writer.config:
                logger.warning(
                    "Diagnostic writer already pinned at %s; ignoring request for %s",
                    self._writer.log_path,
                    config.log_path,
                )
            return self._writer


_PINNED = _PinnedWriter()


def initialize_writer(
    config: WriterConfig | None = None,
    *,
    out: TextIO | None = None,
) -> DiagnosticWriter:
    """Create the process-wide writer, or return it if it already exists.

    Only the first call constructs (and truncates the log). Later calls return the
    same instance; a differing ``config`` is reported and ignored.

    Args:
        config (WriterConfig | None): Configuration for the first construction.
        out (TextIO | None): Console stream for the first construction.

    Returns:
        DiagnosticWriter: The pinned writer.
    """
    return _PINNED.initialize(config, out=out)


def initialize_writer_in(log_dir: str | None) -> None:
    """Pin a writer whose log lives in ``log_dir`` (process initializer helper).

    This is a picklable entry point for ``multiprocessing`` initializers, which
    run in a freshly spawned process.
    """
    from bridgelog.config.model import WriterConfig

    initialize_writer(WriterConfig.from_environment(log_dir=log_dir))


def repin_writer_in(log_dir: str | None) -> None:
    """Discard any writer inherited from a parent process and pin one in ``log_dir``.

    A forked child starts with a copy of its parent's holder, including the
    parent's writer and open log. Bridge servers use this initializer so their
    log always lives where they were asked to put it.
    """
    global _PINNED
    inherited: DiagnosticWriter | None = _PINNED.writer
    if inherited is not None:
        logger.debug("Dropping writer inherited for %s", inherited.log_path)
    _PINNED = _PinnedWriter()
    initialize_writer_in(log_dir)


def get_writer() -> DiagnosticWriter:
    """Return the pinned writer, creating it from the environment on first use."""
    writer: DiagnosticWriter | None = _PINNED.writer
    if writer is not None:
        return writer
    return _PINNED.initialize()


def is_writer_initialized() -> bool:
    """Return whether the process-wide writer has been created."""
    return _PINNED.writer is not None
