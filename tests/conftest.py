# topmark:header:start
#
#   project      : BridgeLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BridgeLog test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Writers built by the fixtures below always log into a per-test temporary
    directory and echo into an in-memory stream, so tests never create
    ``dotnet-test-2.log`` inside the package directory.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from bridgelog import lifetime
from bridgelog.config import WriterConfig, logging
from bridgelog.constants import ENV_LOG_LEVEL, ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS
from bridgelog.writer import DiagnosticWriter

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

WriterFactory = Callable[..., tuple[DiagnosticWriter, io.StringIO]]


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests.

    Removes ``BRIDGELOG_LOG_LEVEL`` (logging noise) and the suppression flag
    (which would change every tagged message).

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Return a per-test directory standing in for the host binary directory."""
    path: Path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def fixed_culture(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the culture name written on the second line of the log to ``en-US``."""
    monkeypatch.setattr("bridgelog.writer.current_culture_name", lambda: "en-US")
    return "en-US"


@pytest.fixture
def make_writer(log_dir: Path, fixed_culture: str) -> WriterFactory:
    """Return a factory building writers that log into `log_dir`.

    The factory accepts ``suppress`` (bool) and ``log_dir`` overrides and returns the
    writer together with the in-memory stream receiving its console copy.
    """

    def _factory(
        *,
        suppress: bool = False,
        directory: Path | None = None,
    ) -> tuple[DiagnosticWriter, io.StringIO]:
        out = io.StringIO()
        config = WriterConfig.from_environment(
            log_dir=directory or log_dir,
            environ={ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS: "true" if suppress else "false"},
        )
        return DiagnosticWriter(config, out=out), out

    return _factory


@pytest.fixture
def fresh_pin(monkeypatch: pytest.MonkeyPatch) -> lifetime._PinnedWriter:
    """Replace the process-wide writer holder with an empty one for this test."""
    holder = lifetime._PinnedWriter()
    monkeypatch.setattr(lifetime, "_PINNED", holder)
    return holder


def init_lines(culture: str = "en-US") -> str:
    """Return the two initialization lines a fresh log starts with."""
    return f"ConsoleWriter Initialized.\nCULTURE: {culture}\n"
