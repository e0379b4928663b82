# topmark:header:start
#
#   project      : BridgeLog
#   file         : errors.py
#   file_relpath : src/bridgelog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BridgeLog CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. The library itself raises plain ``OSError``; commands
    translate it here.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from bridgelog.cli.exit_codes import ExitCode


class BridgelogError(click.ClickException):
    """Base class for all BridgeLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class BridgelogUsageError(BridgelogError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BridgelogUnavailableError(BridgelogError):
    """Error when the writer bridge cannot listen on the requested address."""

    exit_code = ExitCode.UNAVAILABLE


class BridgelogIOError(BridgelogError):
    """Error for I/O errors creating or writing the diagnostic log."""

    exit_code = ExitCode.IO_ERROR
