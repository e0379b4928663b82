# topmark:header:start
#
#   project      : BridgeLog
#   file         : exit_codes.py
#   file_relpath : src/bridgelog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BridgeLog CLI.

BridgeLog aligns with the BSD `sysexits` convention so that test harnesses
driving it can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BridgeLog CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        UNAVAILABLE: The bridge address could not be bound. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        IO_ERROR: The diagnostic log could not be created or written. Mirrors
            BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    UNAVAILABLE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
