# topmark:header:start
#
#   project      : BridgeLog
#   file         : __main__.py
#   file_relpath : src/bridgelog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BridgeLog via ``python -m bridgelog``.

Delegates to :func:`bridgelog.cli.main.cli`, the same Click group as the
``bridgelog`` console script.

Examples:
    Classify a captured stderr line::

        python -m bridgelog classify "WARNING: Please consider reporting this to the maintainers of X"
"""

from __future__ import annotations

from bridgelog.cli.main import cli

if __name__ == "__main__":
    cli()
