# topmark:header:start
#
#   project      : BridgeLog
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command and the bare group."""

from __future__ import annotations

from bridgelog.constants import BRIDGELOG_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_installed_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == BRIDGELOG_VERSION


def test_bare_group_prints_hint_and_help() -> None:
    """Invoking without a subcommand prints a hint followed by the help text."""
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "bridgelog classify" in result.output
    assert "Commands:" in result.output
