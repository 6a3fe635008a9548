# topmark:header:start
#
#   project      : DataFormatter
#   file         : shapes.py
#   file_relpath : src/dataformatter/core/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape classification for formatter input values.

Every value handed to the formatter falls into exactly one of five structural
categories. `classify` computes that category once, so renderers dispatch on a
closed set of tags instead of inspecting types themselves.

    ======================  ==================================  ===================
    ShapeTag                Python value                        Rendered as
    ======================  ==================================  ===================
    ``SCALAR``              anything else (text, numbers, ...)  plain text
    ``SEQUENCE``            ``list`` / ``tuple``                bulleted list
    ``TABLE``               list whose items are all lists      table
    ``ORDERED_LIST``        `OrderedList`                       numbered list
    ``MAPPING``             ``Mapping``                         definition list
    ======================  ==================================  ===================

Design:
    - Classification is total: unknown values are ``SCALAR``.
    - ``str`` and ``bytes`` are never sequences.
    - `HeaderCell` is transparent: it is unwrapped and its inner value classified.
    - Text hints (`Heading`, `Emphasized`) are ``SCALAR``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from dataformatter.core.markers import HeaderCell, OrderedList, TextHint


class ShapeTag(str, Enum):
    """Structural category of a value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    TABLE = "table"
    ORDERED_LIST = "ordered_list"
    MAPPING = "mapping"


# Shapes rendered as list containers; nested directly in a parent list without an item wrapper
LIST_LIKE: Final[frozenset[ShapeTag]] = frozenset(
    {ShapeTag.SEQUENCE, ShapeTag.ORDERED_LIST, ShapeTag.TABLE}
)


def is_list_like(tag: ShapeTag) -> bool:
    """Return True if ``tag`` is a sequence-shaped category.

    Args:
        tag (ShapeTag): The tag to test.

    Returns:
        bool: True for ``SEQUENCE``, ``ORDERED_LIST`` and ``TABLE``.
    """
    return tag in LIST_LIKE


def unwrap_header(value: Any) -> tuple[Any, bool]:
    """Strip one `HeaderCell` layer from ``value``.

    Returns:
        tuple[Any, bool]: The inner value and whether a header marker was present.
    """
    if isinstance(value, HeaderCell):
        return value.value, True
    return value, False


def rows_of(value: Any) -> list[Any] | tuple[Any, ...]:
    """Return the underlying items of a sequence-shaped value.

    Unwraps `OrderedList`; plain lists and tuples are returned as-is.
    """
    if isinstance(value, OrderedList):
        return value.items
    return value


def mapping_key_order(key: Any) -> tuple[str, str]:
    """Sort key for mapping keys: their text, then their type name.

    Keys with the same text but different types (``1`` and ``"1"``) still get a
    fixed order, whatever the insertion order of the mapping.
    """
    return str(key), type(key).__name__


def is_sequence_shaped(value: Any) -> bool:
    """Return True if ``value`` classifies as one of the list-like shapes.

    Equivalent to ``is_list_like(classify(value))`` without descending into the items.
    """
    value, _ = unwrap_header(value)
    return isinstance(value, (list, tuple, OrderedList))


def classify(value: Any) -> ShapeTag:
    """Determine the structural category of ``value``.

    Args:
        value (Any): Any value.

    Returns:
        ShapeTag: The category ``value`` is rendered as.
    """
    value, _ = unwrap_header(value)

    if isinstance(value, OrderedList):
        return ShapeTag.ORDERED_LIST
    if isinstance(value, TextHint):
        return ShapeTag.SCALAR
    if isinstance(value, Mapping):
        return ShapeTag.MAPPING
    if isinstance(value, (list, tuple)):
        # An empty list has no rows; it stays an empty bulleted list
        if value and all(is_sequence_shaped(item) for item in value):
            return ShapeTag.TABLE
        return ShapeTag.SEQUENCE
    return ShapeTag.SCALAR


@dataclass(frozen=True, slots=True)
class ShapeNode:
    """One node of a value tree, as seen by the classifier.

    Attributes:
        depth (int): Nesting depth (0 for the root).
        label (str): Position within the parent: a mapping key, a list index, or
            ``row,column`` for table cells. Empty for the root.
        shape (ShapeTag): Classification of the node.
        header (bool): Whether the node is wrapped in a `HeaderCell`.
        value (Any): The node value with any header marker removed.
    """

    depth: int
    label: str
    shape: ShapeTag
    header: bool
    value: Any


def walk_shapes(value: Any, *, label: str = "", depth: int = 0) -> Iterator[ShapeNode]:
    """Yield the classification of ``value`` and of every nested value, depth first.

    Children are visited in rendering order (mapping keys sorted).
    """
    shape: ShapeTag = classify(value)
    inner, header = unwrap_header(value)
    yield ShapeNode(depth=depth, label=label, shape=shape, header=header, value=inner)

    if shape is ShapeTag.MAPPING:
        for key in sorted(inner, key=mapping_key_order):
            yield from walk_shapes(inner[key], label=str(key), depth=depth + 1)
    elif shape is ShapeTag.TABLE:
        for r, row in enumerate(inner):
            cells = rows_of(unwrap_header(row)[0])
            for c, cell in enumerate(cells):
                yield from walk_shapes(cell, label=f"{r},{c}", depth=depth + 1)
    elif shape in (ShapeTag.SEQUENCE, ShapeTag.ORDERED_LIST):
        for i, item in enumerate(rows_of(inner)):
            yield from walk_shapes(item, label=str(i), depth=depth + 1)
