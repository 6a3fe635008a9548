# topmark:header:start
#
#   project      : DataFormatter
#   file         : __init__.py
#   file_relpath : src/dataformatter/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataFormatter CLI subcommands."""

from __future__ import annotations
