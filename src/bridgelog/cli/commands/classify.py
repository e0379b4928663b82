# topmark:header:start
#
#   project      : BridgeLog
#   file         : classify.py
#   file_relpath : src/bridgelog/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog `classify` command.

Classifies captured error-stream lines the same way the diagnostic writer does,
without touching the log file. Handy for checking a scraped log against the
known-warning table.

Input:
  * Positional MESSAGES, or one message per line on STDIN when none are given.

Output:
  * Default: ``true``/``false`` per message.
  * ``--tag``: the tagged form ``|ERR-<known>-<suppress>|: <message>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bridgelog.classify import is_known_warning, tag_error_message
from bridgelog.config.logging import get_logger
from bridgelog.config.model import WriterConfig

if TYPE_CHECKING:
    from bridgelog.cli.console_api import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="classify",
    help="Tell whether error-stream messages are known, benign warnings.",
)
@click.argument("messages", nargs=-1)
@click.option(
    "--tag",
    is_flag=True,
    default=False,
    help="Print the tagged error form instead of true/false.",
)
@click.option(
    "--suppress/--no-suppress",
    "suppress",
    default=None,
    help="Suppression flag to embed in tags (default: read from the environment).",
)
def classify_command(
    *,
    messages: tuple[str, ...],
    tag: bool = False,
    suppress: bool | None = None,
) -> None:
    """Classify MESSAGES (or STDIN lines) against the known-warning table.

    Args:
        messages (tuple[str, ...]): Messages given on the command line.
        tag (bool): Print tagged messages rather than the classification.
        suppress (bool | None): Explicit suppression flag for tags; None reads the environment.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    items: list[str] = list(messages)
    if not items:
        stdin_text: str = click.get_text_stream("stdin").read()
        items = stdin_text.splitlines()
        logger.debug("Read %d message(s) from STDIN", len(items))

    if suppress is None:
        suppress = WriterConfig.from_environment().suppress_known_warnings

    for message in items:
        if tag:
            console.print(tag_error_message(message, suppress=suppress))
            continue
        known: bool = is_known_warning(message)
        verdict: str = "true" if known else "false"
        if vlevel > 0:
            styled = console.styled(verdict, fg="green" if known else "yellow", bold=True)
            console.print(f"{styled}\t{message}")
        else:
            console.print(verdict)
