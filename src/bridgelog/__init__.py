# topmark:header:start
#
#   project      : BridgeLog
#   file         : __init__.py
#   file_relpath : src/bridgelog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BridgeLog package.

BridgeLog is a small diagnostic sink for console output that crosses a runtime
boundary. It mirrors messages to the console, appends them to a log file next to
the package, tags error-stream messages that match known benign warnings, and
keeps a single pinned writer alive for the whole life of the process.
"""

from __future__ import annotations

from bridgelog.classify import KNOWN_WARNING_PREFIXES, is_known_warning, tag_error_message
from bridgelog.config.model import WriterConfig
from bridgelog.lifetime import get_writer, initialize_writer, is_writer_initialized
from bridgelog.writer import DiagnosticWriter

__all__ = [
    "KNOWN_WARNING_PREFIXES",
    "DiagnosticWriter",
    "WriterConfig",
    "get_writer",
    "initialize_writer",
    "is_known_warning",
    "is_writer_initialized",
    "tag_error_message",
]
