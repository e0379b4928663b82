# topmark:header:start
#
#   project      : BridgeLog
#   file         : model.py
#   file_relpath : src/bridgelog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer configuration model.

This module defines `WriterConfig`, the immutable snapshot a
[`DiagnosticWriter`][bridgelog.writer.DiagnosticWriter] is built from.

Immutability:
    - `WriterConfig` is ``frozen=True`` and stores the prefix table as a tuple.
      The environment is read once, in `WriterConfig.from_environment`; nothing
      re-reads it afterwards.

Environment semantics:
    - ``IGNITE_NET_SUPPRESS_JAVA_ILLEGAL_ACCESS_WARNINGS`` enables the
      suppression flag only when it is *exactly* ``"true"``. ``"TRUE"``, ``"1"``,
      ``" true"``, the empty string and an unset variable all yield ``False``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bridgelog.classify import KNOWN_WARNING_PREFIXES
from bridgelog.config.logging import BridgelogLogger, get_logger
from bridgelog.config.paths import resolve_log_path
from bridgelog.constants import ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger: BridgelogLogger = get_logger(__name__)


def parse_suppress_flag(value: str | None) -> bool:
    """Return True iff ``value`` is exactly the literal string ``"true"``."""
    return value == "true"


@dataclass(frozen=True, slots=True)
class WriterConfig:
    """Immutable configuration of a diagnostic writer.

    Attributes:
        log_path (Path): Absolute path of the diagnostic log file.
        suppress_known_warnings (bool): Advisory flag embedded in tagged error
            messages; the writer itself never drops anything.
        known_warning_prefixes (tuple[str, ...]): Ordered prefixes of benign warnings.
    """

    log_path: Path
    suppress_known_warnings: bool = False
    known_warning_prefixes: tuple[str, ...] = KNOWN_WARNING_PREFIXES

    @classmethod
    def from_environment(
        cls,
        log_dir: Path | str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> WriterConfig:
        """Assemble a config from the process environment.

        Args:
            log_dir (Path | str | None): Directory for the log file; defaults to
                the host binary directory.
            environ (Mapping[str, str] | None): Environment to read; defaults to
                ``os.environ``.

        Returns:
            WriterConfig: The frozen configuration.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        raw: str | None = env.get(ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS)
        config = cls(
            log_path=resolve_log_path(log_dir),
            suppress_known_warnings=parse_suppress_flag(raw),
        )
        logger.trace("%s=%r -> %s", ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS, raw, config)
        return config

    def to_toml_dict(self) -> dict[str, Any]:
        """Return a TOML-friendly mapping of this config (paths as strings)."""
        return {
            "writer": {
                "log_path": str(self.log_path),
                "suppress_known_warnings": self.suppress_known_warnings,
                "suppress_env_var": ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS,
            },
            "classifier": {
                "known_warning_prefixes": list(self.known_warning_prefixes),
            },
        }
