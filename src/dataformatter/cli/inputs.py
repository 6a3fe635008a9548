# topmark:header:start
#
#   project      : DataFormatter
#   file         : inputs.py
#   file_relpath : src/dataformatter/cli/inputs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading input documents for CLI commands.

Arguments are file paths, or ``-`` for a document on STDIN. Library errors are
translated into CLI errors with the matching exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from dataformatter.cli.errors import (
    DataFormatterDecodeError,
    DataFormatterFileNotFoundError,
    DataFormatterIOError,
    DataFormatterUsageError,
)
from dataformatter.config.logging import get_logger
from dataformatter.core.errors import InputDecodeError
from dataformatter.documents import InputFormat, load_document, parse_document

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dataformatter.config.logging import DataFormatterLogger

logger: DataFormatterLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def input_format_option(f: Any) -> Any:
    """Add the ``--format`` option selecting the input document format."""
    return click.option(
        "--format",
        "input_format",
        type=click.Choice([fmt.value for fmt in InputFormat]),
        default=None,
        help="Input format (default: from the file suffix; JSON for STDIN).",
    )(f)


def read_values(
    files: Sequence[str],
    input_format: str | None,
    *,
    each: bool = False,
) -> list[Any]:
    """Load every input document and return the top-level values.

    Args:
        files (Sequence[str]): Paths, or ``-`` for STDIN (at most once).
        input_format (str | None): Explicit input format, or None to guess.
        each (bool): If True, a document whose top level is a list contributes
            each of its items as a separate top-level value.

    Returns:
        list[Any]: The top-level values in input order.

    Raises:
        DataFormatterUsageError: If no input is given or STDIN is requested twice.
        DataFormatterFileNotFoundError: If a path does not exist.
        DataFormatterIOError: If a file cannot be read.
        DataFormatterDecodeError: If a document cannot be parsed.
    """
    if not files:
        raise DataFormatterUsageError("No input given. Pass FILES, or '-' to read STDIN.")
    if list(files).count(STDIN_MARKER) > 1:
        raise DataFormatterUsageError("STDIN ('-') can only be read once.")

    fmt: InputFormat | None = InputFormat(input_format) if input_format else None
    values: list[Any] = []
    for name in files:
        value: Any = _read_one(name, fmt)
        if each and isinstance(value, list):
            values.extend(value)
        else:
            values.append(value)
    logger.debug("Read %d top-level value(s) from %d input(s)", len(values), len(files))
    return values


def _read_one(name: str, fmt: InputFormat | None) -> Any:
    try:
        if name == STDIN_MARKER:
            text: str = click.get_text_stream("stdin").read()
            return parse_document(text, fmt or InputFormat.JSON, source="<stdin>")
        path = Path(name)
        if not path.exists():
            raise DataFormatterFileNotFoundError(f"No such file: {name}")
        return load_document(path, fmt)
    except InputDecodeError as exc:
        raise DataFormatterDecodeError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise DataFormatterDecodeError(f"Cannot decode {name} as UTF-8: {exc}") from exc
    except OSError as exc:
        raise DataFormatterIOError(f"Cannot read {name}: {exc}") from exc
