# topmark:header:start
#
#   project      : DataFormatter
#   file         : __init__.py
#   file_relpath : src/dataformatter/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of value trees into HTML.

Public modules:
    - dataformatter.rendering.html
    - dataformatter.rendering.document

"""

from __future__ import annotations
