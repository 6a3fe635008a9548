# topmark:header:start
#
#   project      : DataFormatter
#   file         : __init__.py
#   file_relpath : src/dataformatter/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for DataFormatter."""

from __future__ import annotations
