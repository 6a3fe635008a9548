# topmark:header:start
#
#   project      : DataFormatter
#   file         : html.py
#   file_relpath : src/dataformatter/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive HTML rendering of value trees.

`render` classifies a value (see `dataformatter.core.shapes`), dispatches to the
renderer for its shape, and each renderer recurses into nested values with the
same `FormattingOptions`. Renderers are generators of markup *fragments* (one
tag or one piece of text each); concatenating the fragments yields a
well-formed, nested HTML snippet.

Shape to markup:
    - scalar: the text itself (``<h1>``/``<em>`` for `Heading`/`Emphasized`)
    - sequence: ``<ul>`` with one ``<li>`` per item
    - ordered list: ``<ol>`` with one ``<li>`` per item
    - table: ``<table>``/``<tr>``/``<td>`` (``<th>`` for `HeaderCell`)
    - mapping: ``<dl>`` with ``<dt>``/``<dd>`` pairs sorted by key

A nested list inside a list is emitted directly, without an ``<li>`` around it.

Scalar text is emitted verbatim unless ``FormattingOptions.escape_text`` is set:
text containing markup characters can break the structure of the output.

Input must be acyclic. Without ``max_depth`` a cycle exhausts the interpreter
stack; with it, `StructureTooDeep` is raised once the limit is crossed.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING, Any, Callable, Final

from dataformatter.config.logging import get_logger
from dataformatter.config.options import FormattingOptions
from dataformatter.core.errors import StructureTooDeep
from dataformatter.core.markers import OrderedList, TextHint
from dataformatter.core.shapes import (
    ShapeTag,
    classify,
    is_list_like,
    mapping_key_order,
    rows_of,
    unwrap_header,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from dataformatter.config.logging import DataFormatterLogger

logger: DataFormatterLogger = get_logger(__name__)

RenderFn = Callable[[Any, FormattingOptions, int], "Iterator[str]"]

DEFAULT_OPTIONS: Final[FormattingOptions] = FormattingOptions()


def render(value: Any, options: FormattingOptions | None = None) -> list[str]:
    """Render ``value`` into a list of HTML fragments.

    Args:
        value (Any): The value tree to render. It is not modified.
        options (FormattingOptions | None): Formatting options; defaults apply when None.

    Returns:
        list[str]: The fragments, in document order. ``"".join(...)`` gives the markup.

    Raises:
        StructureTooDeep: If ``options.max_depth`` is set and exceeded.
    """
    return list(iter_fragments(value, options))


def iter_fragments(value: Any, options: FormattingOptions | None = None) -> Iterator[str]:
    """Yield the HTML fragments of ``value`` lazily.

    Same output as `render`; errors surface while iterating.
    """
    return _fragments(value, options or DEFAULT_OPTIONS, 1)


def _fragments(value: Any, options: FormattingOptions, depth: int) -> Iterator[str]:
    if options.max_depth is not None and depth > options.max_depth:
        raise StructureTooDeep(depth, options.max_depth)

    shape: ShapeTag = classify(value)
    logger.trace("depth %d: rendering %s", depth, shape.value)

    # Header markers only matter to the table renderer; elsewhere they are transparent
    inner, _ = unwrap_header(value)
    yield from _RENDERERS[shape](inner, options, depth)


def _text(value: Any, options: FormattingOptions) -> str:
    text: str = "" if value is None else str(value)
    return html.escape(text) if options.escape_text else text


def _render_scalar(value: Any, options: FormattingOptions, depth: int) -> Iterator[str]:
    if isinstance(value, TextHint):
        yield f"<{value.tag}>{_text(value.text, options)}</{value.tag}>"
    else:
        yield _text(value, options)


def _render_items(items: Sequence[Any], options: FormattingOptions, depth: int) -> Iterator[str]:
    for item in items:
        # Nested lists go straight into the parent list without an item wrapper
        if is_list_like(classify(item)):
            yield from _fragments(item, options, depth + 1)
        else:
            yield "<li>"
            yield from _fragments(item, options, depth + 1)
            yield "</li>"


def _render_sequence(
    value: Sequence[Any], options: FormattingOptions, depth: int
) -> Iterator[str]:
    yield "<ul>"
    yield from _render_items(value, options, depth)
    yield "</ul>"


def _render_ordered_list(
    value: OrderedList, options: FormattingOptions, depth: int
) -> Iterator[str]:
    yield "<ol>"
    yield from _render_items(value.items, options, depth)
    yield "</ol>"


def _table_open_tag(options: FormattingOptions) -> str:
    return (
        f'<table border="{options.table_border}"'
        f' cellspacing="{options.table_spacing}"'
        f' width="{options.table_width}">'
    )


def _render_table(rows: Sequence[Any], options: FormattingOptions, depth: int) -> Iterator[str]:
    yield _table_open_tag(options)
    for row in rows:
        row, _ = unwrap_header(row)
        cells: Sequence[Any] = rows_of(row)
        last: int = len(cells) - 1
        yield "<tr>"
        for idx, cell in enumerate(cells):
            content, is_header = unwrap_header(cell)
            cell_tag: str = "th" if is_header else "td"
            if idx == last and options.table_expand_right_col:
                yield f'<{cell_tag} valign="top" width="100%">'
            else:
                yield f'<{cell_tag} valign="top">'
            yield from _fragments(content, options, depth + 1)
            yield f"</{cell_tag}>"
        yield "</tr>"
    yield "</table>"


def _render_mapping(
    value: Mapping[Any, Any], options: FormattingOptions, depth: int
) -> Iterator[str]:
    yield "<dl>"
    # Ascending order of the key text, whatever the mapping's own order
    for key in sorted(value, key=mapping_key_order):
        yield f"<dt>{_text(key, options)}</dt>"
        yield "<dd>"
        yield from _fragments(value[key], options, depth + 1)
        yield "</dd>"
    yield "</dl>"


_RENDERERS: Final[dict[ShapeTag, RenderFn]] = {
    ShapeTag.SCALAR: _render_scalar,
    ShapeTag.SEQUENCE: _render_sequence,
    ShapeTag.ORDERED_LIST: _render_ordered_list,
    ShapeTag.TABLE: _render_table,
    ShapeTag.MAPPING: _render_mapping,
}
