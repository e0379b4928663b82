# topmark:header:start
#
#   project      : BridgeLog
#   file         : __init__.py
#   file_relpath : src/bridgelog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for BridgeLog.

Re-exports the immutable [`WriterConfig`][bridgelog.config.model.WriterConfig]
and the path helpers so callers can write ``from bridgelog.config import WriterConfig``.
"""

from __future__ import annotations

from bridgelog.config.model import WriterConfig, parse_suppress_flag
from bridgelog.config.paths import current_culture_name, host_binary_dir, resolve_log_path

__all__ = [
    "WriterConfig",
    "current_culture_name",
    "host_binary_dir",
    "parse_suppress_flag",
    "resolve_log_path",
]
