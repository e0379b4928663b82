# topmark:header:start
#
#   project      : BridgeLog
#   file         : bridge.py
#   file_relpath : src/bridgelog/bridge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cross-process call surface for the pinned diagnostic writer.

The writer is exposed through a ``multiprocessing`` manager. Only ``write`` is
exposed. The manager reference-counts the proxies it hands out and drops its own
reference once they are all gone; because the registered factory returns the
writer pinned in [`bridgelog.lifetime`][bridgelog.lifetime], dropping every proxy
never disposes the writer and a proxy acquired later (even much later) reaches
the same object and the same, untruncated log.

Usage:
    Server side (the process that owns the log):

    ```python
    from bridgelog.bridge import serve_forever

    serve_forever(("127.0.0.1", 50123), b"secret", log_dir="/tmp/run-42")
    ```

    Client side (the process producing output):

    ```python
    from bridgelog.bridge import connect_writer

    writer = connect_writer(("127.0.0.1", 50123), b"secret")
    writer.write("WARNING: An illegal reflective access operation has occurred\\n", True)
    ```
"""

from __future__ import annotations

import multiprocessing
from multiprocessing.managers import BaseManager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bridgelog.config.logging import BridgelogLogger, get_logger
from bridgelog.constants import BRIDGE_TYPEID
from bridgelog.lifetime import get_writer, initialize_writer_in, repin_writer_in

if TYPE_CHECKING:
    from multiprocessing.context import BaseContext

logger: BridgelogLogger = get_logger(__name__)

Address = tuple[str, int] | str


class WriterManager(BaseManager):
    """Manager serving the process-wide diagnostic writer."""


WriterManager.register(BRIDGE_TYPEID, callable=get_writer, exposed=("write",))


def _log_dir_arg(log_dir: Path | str | None) -> str | None:
    return None if log_dir is None else str(Path(log_dir).resolve())


def make_manager(
    address: Address | None = None,
    authkey: bytes | None = None,
    ctx: BaseContext | None = None,
) -> WriterManager:
    """Return an unstarted manager for ``address``."""
    return WriterManager(address=address, authkey=authkey, ctx=ctx)


def start_manager(
    log_dir: Path | str | None = None,
    *,
    address: Address | None = None,
    authkey: bytes | None = None,
    ctx: BaseContext | None = None,
) -> WriterManager:
    """Start a manager server in a child process that owns the diagnostic log.

    The child pins a new writer before serving, so the log in ``log_dir`` is
    created (and truncated) exactly once, even when a forked child inherited
    a writer pinned by this process.

    Args:
        log_dir (Path | str | None): Directory for the log; defaults to the host
            binary directory.
        address (Address | None): Listening address; None picks a free one.
        authkey (bytes | None): Authentication key; None uses the current process key.
        ctx (BaseContext | None): Multiprocessing context used to start the server.
            Defaults to the ``spawn`` context.

    Returns:
        WriterManager: The started manager. Call ``shutdown()`` when done.
    """
    if ctx is None:
        ctx = multiprocessing.get_context("spawn")
    manager: WriterManager = make_manager(address, authkey, ctx)
    manager.start(initializer=repin_writer_in, initargs=(_log_dir_arg(log_dir),))
    logger.info("Writer bridge started at %r", manager.address)
    return manager


def connect_writer(address: Address, authkey: bytes) -> Any:
    """Connect to a running bridge and return a proxy exposing ``write``."""
    manager: WriterManager = make_manager(address, authkey)
    manager.connect()
    logger.debug("Connected to writer bridge at %r", address)
    return getattr(manager, BRIDGE_TYPEID)()


def serve_forever(
    address: Address,
    authkey: bytes,
    log_dir: Path | str | None = None,
) -> None:
    """Pin the writer in the current process and serve it until interrupted."""
    initialize_writer_in(_log_dir_arg(log_dir))
    server = make_manager(address, authkey).get_server()
    logger.info("Serving diagnostic writer at %r", server.address)
    server.serve_forever()
