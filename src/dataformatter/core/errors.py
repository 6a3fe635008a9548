# topmark:header:start
#
#   project      : DataFormatter
#   file         : errors.py
#   file_relpath : src/dataformatter/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the DataFormatter library.

Classification never fails and rendering never fails for finite, acyclic
input, so the library surface is small. Cyclic input is a caller contract
violation: without a depth limit it ends in ``RecursionError``; with
``FormattingOptions.max_depth`` set it is reported as `StructureTooDeep`.
"""

from __future__ import annotations


class DataFormatterError(Exception):
    """Base class for all DataFormatter library errors."""


class StructureTooDeep(DataFormatterError):
    """Raised when a value nests deeper than the configured ``max_depth``.

    Attributes:
        depth (int): The nesting depth that was reached.
        limit (int): The configured limit.
    """

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"Value nesting depth {depth} exceeds the limit of {limit}")
        self.depth = depth
        self.limit = limit


class InputDecodeError(DataFormatterError):
    """Raised when an input document cannot be parsed into a value tree.

    Attributes:
        source (str): Human-readable name of the input (file path or ``<stdin>``).
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot decode {source}: {reason}")
        self.source = source
