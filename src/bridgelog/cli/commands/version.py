# topmark:header:start
#
#   project      : BridgeLog
#   file         : version.py
#   file_relpath : src/bridgelog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog `version` command.

Prints the current BridgeLog version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bridgelog.constants import BRIDGELOG_VERSION

if TYPE_CHECKING:
    from bridgelog.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of BridgeLog.",
)
def version_command() -> None:
    """Show the current version of BridgeLog."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("BridgeLog version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BRIDGELOG_VERSION, bold=True)}")
    else:
        console.print(console.styled(BRIDGELOG_VERSION, bold=True))
