# topmark:header:start
#
#   project      : BridgeLog
#   file         : console_api.py
#   file_relpath : src/bridgelog/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console surface the BridgeLog commands print through.

Commands print results (classifications, prefixes, the TOML config, the log
location) and errors; internal logging never goes through here.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs from a console: plain lines, error lines, styling."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
