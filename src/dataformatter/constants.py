# topmark:header:start
#
#   project      : DataFormatter
#   file         : constants.py
#   file_relpath : src/dataformatter/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataFormatter Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DATAFORMATTER_VERSION: str = get_version("dataformatter")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "DATAFORMATTER_LOG_LEVEL"

# Name of the TOML table holding formatting options:
FORMATTING_TABLE: str = "formatting"

DEFAULT_DOCUMENT_TITLE: str = "Test log"
DEFAULT_FRAGMENT_SEPARATOR: str = "\n"

# Single-key mappings recognized as markers when decoding JSON/TOML documents
ORDERED_MARKER_KEY: str = "$ordered"
HEADER_MARKER_KEY: str = "$header"
HEADING_MARKER_KEY: str = "$heading"
EMPHASIZED_MARKER_KEY: str = "$emphasized"
