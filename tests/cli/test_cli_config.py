# topmark:header:start
#
#   project      : BridgeLog
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `config` command output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from bridgelog.classify import KNOWN_WARNING_PREFIXES
from bridgelog.constants import (
    ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS,
    LOG_FILE_NAME,
    TOML_BLOCK_END,
    TOML_BLOCK_START,
)
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path


def _extract_toml(output: str) -> dict[str, Any]:
    lines = output.splitlines()
    start = lines.index(TOML_BLOCK_START)
    end = lines.index(TOML_BLOCK_END)
    return tomlkit.parse("\n".join(lines[start + 1 : end])).unwrap()


def test_config_dump_is_valid_toml(log_dir: Path) -> None:
    """The dump parses as TOML and reflects the effective configuration."""
    result = run_cli(
        ["--no-color", "config", "--log-dir", str(log_dir)],
        env={ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS: "true"},
    )

    assert_SUCCESS(result)
    data = _extract_toml(result.output)
    assert data["writer"]["log_path"] == str(log_dir.resolve() / LOG_FILE_NAME)
    assert data["writer"]["suppress_known_warnings"] is True
    assert data["writer"]["suppress_env_var"] == ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS
    assert data["classifier"]["known_warning_prefixes"] == list(KNOWN_WARNING_PREFIXES)


def test_config_does_not_create_log(log_dir: Path) -> None:
    """Dumping the configuration never touches the log file."""
    result = run_cli(["--no-color", "config", "--log-dir", str(log_dir)])

    assert_SUCCESS(result)
    assert not (log_dir / LOG_FILE_NAME).exists()
    assert _extract_toml(result.output)["writer"]["suppress_known_warnings"] is False
