# topmark:header:start
#
#   project      : DataFormatter
#   file         : __init__.py
#   file_relpath : src/dataformatter/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks: value markers, shape classification and errors.

Nothing in this package performs I/O or depends on Click or yachalk.
"""

from __future__ import annotations
