# topmark:header:start
#
#   project      : BridgeLog
#   file         : paths.py
#   file_relpath : src/bridgelog/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers for resolving where the diagnostic log lives and the active culture.

These do no I/O beyond ``Path.resolve()`` and a locale query.
"""

from __future__ import annotations

import locale
from pathlib import Path

from bridgelog.config.logging import BridgelogLogger, get_logger
from bridgelog.constants import LOG_FILE_NAME

logger: BridgelogLogger = get_logger(__name__)


def host_binary_dir() -> Path:
    """Return the directory holding the installed ``bridgelog`` package.

    This is the location of the component's own code, which is where test
    harnesses look for artifacts after a run.
    """
    import bridgelog

    return Path(bridgelog.__file__).resolve().parent


def resolve_log_path(log_dir: Path | str | None = None) -> Path:
    """Return the absolute path of the diagnostic log file.

    Args:
        log_dir (Path | str | None): Directory to place the log in. Defaults to
            [`host_binary_dir`][bridgelog.config.paths.host_binary_dir].

    Returns:
        Path: ``<log_dir>/dotnet-test-2.log``, absolute.
    """
    base: Path = host_binary_dir() if log_dir is None else Path(log_dir).resolve()
    return base / LOG_FILE_NAME


def current_culture_name() -> str:
    """Return the active locale as a culture name (e.g. ``en-US``).

    The name comes from the raw ``LC_CTYPE`` setting. C and POSIX locales, with
    or without an encoding suffix, map to the empty string like an invariant culture.
    """
    try:
        raw: str = locale.setlocale(locale.LC_CTYPE)
    except locale.Error:
        logger.debug("Locale setting could not be queried; reporting invariant culture")
        return ""
    # en_US.UTF-8@euro -> en_US
    name: str = raw.split("@", 1)[0].split(".", 1)[0]
    if name in ("", "C", "POSIX"):
        return ""
    return name.replace("_", "-")
