# topmark:header:start
#
#   project      : DataFormatter
#   file         : __init__.py
#   file_relpath : src/dataformatter/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for DataFormatter: formatting options, TOML I/O and logging."""

from __future__ import annotations
