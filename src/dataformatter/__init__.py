# topmark:header:start
#
#   project      : DataFormatter
#   file         : __init__.py
#   file_relpath : src/dataformatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataFormatter package.

DataFormatter turns nested in-memory data (scalars, lists, lists of lists and
mappings) into HTML for human-facing reports. Lists become bulleted lists,
lists of lists become tables, `OrderedList` values become numbered lists and
mappings become definition lists sorted by key.

Example:
    ```python
    from dataformatter import OrderedList, format_html

    html = format_html(
        "The following foods are tasty:",
        ["Pizza", "Pumpkin pie"],
        OrderedList(["Peel it", "Split it", "Eat it"]),
    )
    ```
"""

from __future__ import annotations

from dataformatter.config.options import FormattingOptions
from dataformatter.core.errors import DataFormatterError, InputDecodeError, StructureTooDeep
from dataformatter.core.markers import Emphasized, HeaderCell, Heading, OrderedList
from dataformatter.core.shapes import ShapeTag, classify
from dataformatter.rendering.document import HtmlFormatter, emphasized, format_html, heading
from dataformatter.rendering.html import iter_fragments, render

__all__ = [
    "DataFormatterError",
    "Emphasized",
    "FormattingOptions",
    "HeaderCell",
    "Heading",
    "HtmlFormatter",
    "InputDecodeError",
    "OrderedList",
    "ShapeTag",
    "StructureTooDeep",
    "classify",
    "emphasized",
    "format_html",
    "heading",
    "iter_fragments",
    "render",
]
