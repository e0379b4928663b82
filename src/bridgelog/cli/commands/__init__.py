# topmark:header:start
#
#   project      : BridgeLog
#   file         : __init__.py
#   file_relpath : src/bridgelog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the BridgeLog CLI."""
