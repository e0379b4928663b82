# topmark:header:start
#
#   project      : BridgeLog
#   file         : warnings.py
#   file_relpath : src/bridgelog/cli/commands/warnings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog `warnings` command.

Lists the known benign warning prefixes, in classification order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bridgelog.classify import KNOWN_WARNING_PREFIXES

if TYPE_CHECKING:
    from bridgelog.cli.console_api import ConsoleLike


@click.command(
    name="warnings",
    help="List the known warning prefixes recognized by the classifier.",
)
def warnings_command() -> None:
    """List the known warning prefixes, one per line."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if vlevel > 0:
        console.print(console.styled("Known warning prefixes:\n", bold=True, underline=True))
        for index, prefix in enumerate(KNOWN_WARNING_PREFIXES, start=1):
            console.print(f"  {index}. {prefix}")
        return

    for prefix in KNOWN_WARNING_PREFIXES:
        console.print(prefix)
