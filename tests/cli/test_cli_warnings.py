# topmark:header:start
#
#   project      : BridgeLog
#   file         : test_cli_warnings.py
#   file_relpath : tests/cli/test_cli_warnings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `warnings` command."""

from __future__ import annotations

from bridgelog.classify import KNOWN_WARNING_PREFIXES
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_warnings_lists_prefixes_in_order() -> None:
    """The default output is one prefix per line, in classification order."""
    result = run_cli(["--no-color", "warnings"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == list(KNOWN_WARNING_PREFIXES)


def test_warnings_verbose_numbers_prefixes() -> None:
    """With -v the prefixes are numbered under a heading."""
    result = run_cli(["--no-color", "-v", "warnings"])

    assert_SUCCESS(result)
    assert "Known warning prefixes:" in result.output
    assert f"  5. {KNOWN_WARNING_PREFIXES[4]}" in result.output
