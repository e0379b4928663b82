# topmark:header:start
#
#   project      : BridgeLog
#   file         : config.py
#   file_relpath : src/bridgelog/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog `config` command.

Dumps the effective writer configuration (log path, suppression flag, warning
prefixes) as TOML, exactly as a writer constructed now would see it. The log
file itself is not created.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import click
import tomlkit

from bridgelog.cli.options import log_dir_option
from bridgelog.config.model import WriterConfig
from bridgelog.constants import BRIDGELOG_VERSION, TOML_BLOCK_END, TOML_BLOCK_START

if TYPE_CHECKING:
    from pathlib import Path

    from bridgelog.cli.console_api import ConsoleLike


def render_config_toml(config: WriterConfig) -> str:
    """Render ``config`` as a TOML document."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment(f"BridgeLog {BRIDGELOG_VERSION} effective writer configuration"))
    for key, table in config.to_toml_dict().items():
        doc.add(key, cast("Any", table))
    return tomlkit.dumps(doc)


@click.command(
    name="config",
    help="Dump the effective diagnostic writer configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN[TOML] ===' and '# === END[TOML] ===' markers.",
)
@log_dir_option
def config_command(*, log_dir: Path | None = None) -> None:
    """Dump the effective writer configuration as TOML.

    Args:
        log_dir (Path | None): Directory of the diagnostic log; defaults to the package directory.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config = WriterConfig.from_environment(log_dir=log_dir)

    console.print(TOML_BLOCK_START)
    console.print(render_config_toml(config).rstrip("\n"))
    console.print(TOML_BLOCK_END)
