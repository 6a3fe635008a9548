# topmark:header:start
#
#   project      : DataFormatter
#   file         : decode.py
#   file_relpath : src/dataformatter/core/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode marker objects in plain data into DataFormatter markers.

JSON and TOML have no way to say "ordered list" or "header cell", so documents
spell markers as single-key mappings:

    ======================  ==================
    Document form           Decoded value
    ======================  ==================
    ``{"$ordered": [...]}``   `OrderedList`
    ``{"$header": value}``    `HeaderCell`
    ``{"$heading": text}``    `Heading`
    ``{"$emphasized": text}`` `Emphasized`
    ======================  ==================

Any other mapping, list or scalar is rebuilt as-is; the input is never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dataformatter.constants import (
    EMPHASIZED_MARKER_KEY,
    HEADER_MARKER_KEY,
    HEADING_MARKER_KEY,
    ORDERED_MARKER_KEY,
)
from dataformatter.core.markers import Emphasized, HeaderCell, Heading, OrderedList


def decode_markers(value: Any) -> Any:
    """Return a copy of ``value`` with marker mappings replaced by marker objects.

    Args:
        value (Any): Parsed JSON/TOML data.

    Returns:
        Any: The decoded value tree.

    Raises:
        ValueError: If a ``$ordered`` marker does not wrap a list, or a text marker
            wraps a container.
    """
    if isinstance(value, Mapping):
        if len(value) == 1:
            key, inner = next(iter(value.items()))
            marker: Any | None = _decode_marker(key, inner)
            if marker is not None:
                return marker
        return {key: decode_markers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [decode_markers(item) for item in value]
    return value


def _decode_marker(key: Any, inner: Any) -> Any | None:
    if key == ORDERED_MARKER_KEY:
        if not isinstance(inner, (list, tuple)):
            raise ValueError(f"{ORDERED_MARKER_KEY!r} must wrap a list, got {inner!r}")
        return OrderedList([decode_markers(item) for item in inner])
    if key == HEADER_MARKER_KEY:
        return HeaderCell(decode_markers(inner))
    if key in (HEADING_MARKER_KEY, EMPHASIZED_MARKER_KEY):
        if isinstance(inner, (Mapping, list, tuple)):
            raise ValueError(f"{key!r} must wrap text, got {inner!r}")
        return Heading(inner) if key == HEADING_MARKER_KEY else Emphasized(inner)
    return None
