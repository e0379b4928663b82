# topmark:header:start
#
#   project      : BridgeLog
#   file         : serve.py
#   file_relpath : src/bridgelog/cli/commands/serve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog `serve` command.

Pins the diagnostic writer in this process and exposes its ``write`` operation to
other processes through [`bridgelog.bridge`][bridgelog.bridge] until interrupted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bridgelog.bridge import serve_forever
from bridgelog.cli.errors import BridgelogIOError, BridgelogUnavailableError
from bridgelog.cli.options import log_dir_option
from bridgelog.config.logging import get_logger
from bridgelog.config.model import WriterConfig
from bridgelog.lifetime import initialize_writer

if TYPE_CHECKING:
    from pathlib import Path

    from bridgelog.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def parse_address(
    ctx: click.Context | None,
    param: click.Parameter | None,
    value: str,
) -> tuple[str, int]:
    """Parse ``HOST:PORT`` into an address tuple (Click callback)."""
    host, sep, port = value.rpartition(":")
    if not sep or not host or not port.isdigit() or not 0 <= int(port) <= 65535:
        raise click.BadParameter(f"expected HOST:PORT, got {value!r}", ctx=ctx, param=param)
    return host, int(port)


@click.command(
    name="serve",
    help="Expose the pinned diagnostic writer to other processes.",
)
@click.option(
    "--address",
    default="127.0.0.1:0",
    show_default=True,
    callback=parse_address,
    help="Listening address as HOST:PORT (port 0 picks a free port).",
)
@click.option(
    "--authkey",
    envvar="BRIDGELOG_AUTHKEY",
    required=True,
    help="Shared authentication key (or set BRIDGELOG_AUTHKEY).",
)
@log_dir_option
def serve_command(
    *,
    address: tuple[str, int],
    authkey: str,
    log_dir: Path | None = None,
) -> None:
    """Serve the pinned writer until interrupted.

    Args:
        address (tuple[str, int]): Host and port to listen on.
        authkey (str): Authentication key shared with connecting processes.
        log_dir (Path | None): Directory of the diagnostic log.

    Raises:
        BridgelogIOError: If the diagnostic log cannot be created.
        BridgelogUnavailableError: If the address cannot be bound.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    try:
        writer = initialize_writer(WriterConfig.from_environment(log_dir=log_dir))
    except OSError as exc:
        logger.error("Diagnostic log could not be created: %s", exc)
        raise BridgelogIOError(f"Cannot create diagnostic log: {exc}") from exc

    if ctx.obj.get("verbosity_level", 0) >= 0:
        console.print(f"Diagnostic log: {writer.log_path}")

    try:
        serve_forever(address, authkey.encode("utf-8"), log_dir)
    except OSError as exc:
        logger.error("Bridge server failed on %s:%d: %s", address[0], address[1], exc)
        raise BridgelogUnavailableError(f"Cannot listen on {address[0]}:{address[1]}: {exc}") from exc
