# topmark:header:start
#
#   project      : DataFormatter
#   file         : io.py
#   file_relpath : src/dataformatter/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for DataFormatter configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters extract typed values from a parsed table; a value of the wrong type is
logged as a warning and replaced by the default, so a mistake in a config file
never aborts rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dataformatter.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from dataformatter.config.logging import DataFormatterLogger

TomlTable = dict[str, Any]

logger: DataFormatterLogger = get_logger(__name__)


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.

    Returns:
        TomlTable: The parsed top-level table.

    Raises:
        TomlkitParseError: If the text is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table, or an empty dict when absent."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for key %r, got %r; ignoring it", key, value)
    return {}


def get_int_value(table: TomlTable, key: str, default: int) -> int:
    """Extract an integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (int): Value used when the key is missing or not an integer.

    Returns:
        int: The extracted value or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected an integer for %r, got %r; using default (%r)", key, value, default)
    return default


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Returns:
        int | None: The integer, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected an integer for %r, got %r; ignoring it", key, value)
    return None


def get_string_value(table: TomlTable, key: str, default: str = "") -> str:
    """Extract a string value from a TOML table.

    If the value is a ``str``, it is returned as is. If the value is of type
    ``int`` or ``float``, it is coerced to a string using ``str(...)``.
    When the key is missing or the value is not coercible, ``default`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (str): Default value if the key is not found or not coercible.

    Returns:
        str: The extracted or coerced string value, or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    logger.warning("Cannot coerce %r for %r to string; using default (%r)", value, key, default)
    return default


def get_bool_value(table: TomlTable, key: str, default: bool = False) -> bool:
    """Extract a boolean value from a TOML table.

    If the value is a ``bool``, it is returned as is. If the value is an integer,
    it is coerced via ``bool(value)``. When the key is missing or the value is not
    coercible, ``default`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (bool): Default value if the key is not found or not coercible.

    Returns:
        bool: The extracted or coerced boolean value, or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Cannot coerce %r for %r to bool; using default (%r)", value, key, default)
    return default
