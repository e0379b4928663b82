# topmark:header:start
#
#   project      : BridgeLog
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BridgeLog through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from bridgelog.cli.exit_codes import ExitCode
from bridgelog.cli.main import cli
from bridgelog.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-apply the session logging setup after each CLI run.

    The CLI reconfigures the root logger against the runner's temporary stderr;
    later tests must not log into that closed stream.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "warnings"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.IO_ERROR, result.output
