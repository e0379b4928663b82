# topmark:header:start
#
#   project      : BridgeLog
#   file         : classify.py
#   file_relpath : src/bridgelog/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification of error-stream messages against known benign warnings.

A JVM running on Java 11+ prints a fixed block of "illegal reflective access"
warnings to stderr when the Ignite internals reach into JDK classes. Those lines
are expected and harmless; this module recognizes them so downstream log scraping
can tell them apart from real errors.

Everything here is pure and lock-free: the prefix table is an immutable tuple and
the helpers neither read nor write shared state.
"""

from __future__ import annotations

from typing import Final

from bridgelog.constants import ERROR_TAG_FORMAT

KNOWN_WARNING_PREFIXES: Final[tuple[str, ...]] = (
    "WARNING: An illegal reflective access operation has occurred",
    "WARNING: Illegal reflective access by org.apache.ignite.internal.util.GridUnsafe$2",
    "WARNING: Please consider reporting this to the maintainers of",
    "WARNING: Use --illegal-access=warn to enable warnings of further illegal reflective "
    "access operations",
    "WARNING: All illegal access operations will be denied in a future release",
)


def is_known_warning(
    message: str,
    prefixes: tuple[str, ...] = KNOWN_WARNING_PREFIXES,
) -> bool:
    """Return whether ``message`` starts with one of the known warning prefixes.

    The comparison is ordinal (plain ``str.startswith``) and stops at the first
    matching prefix. A message that merely *contains* a warning further in does
    not match.

    Args:
        message (str): The error-stream message to classify.
        prefixes (tuple[str, ...]): Prefix table to test against.

    Returns:
        bool: True if the message is a known, benign warning.
    """
    for prefix in prefixes:
        if message.startswith(prefix):
            return True
    return False


def tag_error_message(
    message: str,
    *,
    suppress: bool,
    prefixes: tuple[str, ...] = KNOWN_WARNING_PREFIXES,
) -> str:
    """Return the tagged form of an error-stream message.

    The tag is ``|ERR-<known>-<suppress>|: `` with both booleans rendered as
    ``True``/``False``. Tagging is informational only; the message itself is kept.

    Args:
        message (str): The original error-stream message.
        suppress (bool): The suppression flag to embed in the tag.
        prefixes (tuple[str, ...]): Prefix table used to classify the message.

    Returns:
        str: The tagged message.
    """
    return ERROR_TAG_FORMAT.format(
        known=is_known_warning(message, prefixes),
        suppress=suppress,
        message=message,
    )
