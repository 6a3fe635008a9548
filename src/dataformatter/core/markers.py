# topmark:header:start
#
#   project      : DataFormatter
#   file         : markers.py
#   file_relpath : src/dataformatter/core/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Explicit marker types that attach rendering intent to a value.

Plain Python containers already say most of what the formatter needs to know:
lists become bulleted lists, lists of lists become tables and mappings become
definition lists. The markers below carry the remaining intent explicitly:

- `OrderedList`: render a sequence as a numbered list.
- `HeaderCell`: render a table cell as a header cell.
- `Heading` / `Emphasized`: text hints; the value stays a scalar but is wrapped
  in a heading or emphasis tag when rendered.

All markers are frozen and wrap exactly one value; wrapping never copies or
mutates the caller's data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class OrderedList:
    """A sequence to be rendered as an ordered (numbered) list.

    Attributes:
        items (list[Any] | tuple[Any, ...]): The wrapped sequence.
    """

    items: list[Any] | tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class HeaderCell:
    """A table cell to be rendered as a header cell (``<th>``).

    Outside of a table the marker is transparent and the inner value is
    rendered as if it had not been wrapped.

    Attributes:
        value (Any): The wrapped cell value.
    """

    value: Any


@dataclass(frozen=True, slots=True)
class TextHint:
    """Base class for scalar text that is rendered inside a wrapping tag.

    Subclasses define the tag through the ``tag`` class variable.

    Attributes:
        text (Any): The wrapped text (converted with ``str()`` when rendered).
    """

    tag: ClassVar[str] = "span"

    text: Any


@dataclass(frozen=True, slots=True)
class Heading(TextHint):
    """Text rendered as a top-level heading (``<h1>``)."""

    tag: ClassVar[str] = "h1"


@dataclass(frozen=True, slots=True)
class Emphasized(TextHint):
    """Text rendered as emphasized (``<em>``)."""

    tag: ClassVar[str] = "em"
