# topmark:header:start
#
#   project      : DataFormatter
#   file         : documents.py
#   file_relpath : src/dataformatter/documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load input documents (JSON or TOML) as value trees.

JSON is parsed with the standard library, TOML with `tomlkit`. After parsing,
marker mappings are decoded (see `dataformatter.core.decode`).
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any

from tomlkit.exceptions import TOMLKitError

from dataformatter.config.io import parse_toml_text
from dataformatter.config.logging import get_logger
from dataformatter.core.decode import decode_markers
from dataformatter.core.errors import InputDecodeError

if TYPE_CHECKING:
    from pathlib import Path

    from dataformatter.config.logging import DataFormatterLogger

logger: DataFormatterLogger = get_logger(__name__)


class InputFormat(str, Enum):
    """Supported input document formats."""

    JSON = "json"
    TOML = "toml"


def format_for_path(path: Path | None) -> InputFormat:
    """Guess the input format from a file suffix; JSON unless the suffix is ``.toml``."""
    if path is not None and path.suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def parse_document(text: str, fmt: InputFormat, *, source: str = "<string>") -> Any:
    """Parse document text and decode its markers.

    Args:
        text (str): Document text.
        fmt (InputFormat): Format of ``text``.
        source (str): Name of the input, used in error messages.

    Returns:
        Any: The decoded value tree.

    Raises:
        InputDecodeError: If the text cannot be parsed or contains malformed markers.
    """
    try:
        data: Any = json.loads(text) if fmt == InputFormat.JSON else parse_toml_text(text)
    except (json.JSONDecodeError, TOMLKitError) as exc:
        raise InputDecodeError(source, str(exc)) from exc

    try:
        value: Any = decode_markers(data)
    except ValueError as exc:
        raise InputDecodeError(source, str(exc)) from exc

    logger.debug("Parsed %s document from %s", fmt.value, source)
    return value


def load_document(path: Path, fmt: InputFormat | None = None) -> Any:
    """Read and parse a document file.

    Args:
        path (Path): File to read (UTF-8).
        fmt (InputFormat | None): Explicit format; guessed from the suffix when None.

    Returns:
        Any: The decoded value tree.

    Raises:
        OSError: If the file cannot be read.
        InputDecodeError: If the content cannot be parsed.
    """
    text: str = path.read_text(encoding="utf-8")
    return parse_document(text, fmt or format_for_path(path), source=str(path))
