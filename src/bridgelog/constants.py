# topmark:header:start
#
#   project      : BridgeLog
#   file         : constants.py
#   file_relpath : src/bridgelog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BRIDGELOG_VERSION: str = get_version("bridgelog")

# Fixed name of the diagnostic log file, created next to the package:
LOG_FILE_NAME: str = "dotnet-test-2.log"

# Environment variable: whether stderr warnings from Java 11+ are to be suppressed downstream.
ENV_SUPPRESS_ILLEGAL_ACCESS_WARNINGS: str = "IGNITE_NET_SUPPRESS_JAVA_ILLEGAL_ACCESS_WARNINGS"

# Environment variable: level of BridgeLog's own internal logging.
ENV_LOG_LEVEL: str = "BRIDGELOG_LOG_LEVEL"

INIT_MARKER: str = "ConsoleWriter Initialized."
CULTURE_PREFIX: str = "CULTURE: "

# Tagged form of an error-stream message: |ERR-<is known warning>-<suppress flag>|: <message>
ERROR_TAG_FORMAT: str = "|ERR-{known}-{suppress}|: {message}"

# Type id under which the pinned writer is registered with the cross-process manager.
BRIDGE_TYPEID: str = "DiagnosticWriter"

TOML_BLOCK_START: str = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: str = "# === END[TOML] ==="
