# topmark:header:start
#
#   project      : BridgeLog
#   file         : main.py
#   file_relpath : src/bridgelog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog command line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bridgelog.cli.commands.classify import classify_command
from bridgelog.cli.commands.config import config_command
from bridgelog.cli.commands.serve import serve_command
from bridgelog.cli.commands.version import version_command
from bridgelog.cli.commands.warnings import warnings_command
from bridgelog.cli.console import ClickConsole
from bridgelog.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from bridgelog.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from bridgelog.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only.
    setup_logging(level=resolve_env_log_level())

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color
    logger.debug("Verbosity %d, color %s", ctx.obj["verbosity_level"], enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BridgeLog CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the BridgeLog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'bridgelog classify MESSAGE' to classify a stderr line.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(classify_command)

cli.add_command(warnings_command)

cli.add_command(config_command)

cli.add_command(serve_command)

if __name__ == "__main__":
    cli()
