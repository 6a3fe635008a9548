# topmark:header:start
#
#   project      : DataFormatter
#   file         : inspect.py
#   file_relpath : src/dataformatter/cli/commands/inspect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataFormatter `inspect` command.

Prints how the classifier sees a document: one line per value, indented by
nesting depth, with the shape the value will be rendered as.

Example output::

    mapping
      bob: scalar 12
      joe: table (2)
        0,0: scalar 'H1' [header]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Final

import click
from yachalk import chalk

from dataformatter.cli.inputs import input_format_option, read_values
from dataformatter.core.markers import TextHint
from dataformatter.core.shapes import ShapeNode, ShapeTag, rows_of, walk_shapes

if TYPE_CHECKING:
    from dataformatter.cli.console import ConsoleLike

SHAPE_COLORS: Final[dict[ShapeTag, Callable[..., str]]] = {
    ShapeTag.SCALAR: chalk.white,
    ShapeTag.SEQUENCE: chalk.cyan,
    ShapeTag.ORDERED_LIST: chalk.blue,
    ShapeTag.TABLE: chalk.magenta,
    ShapeTag.MAPPING: chalk.green,
}

SCALAR_PREVIEW_WIDTH: Final[int] = 40


def describe_node(node: ShapeNode, *, color: bool) -> str:
    """Return the outline line for one node (without indentation)."""
    shape_text: str = node.shape.value
    if color:
        shape_text = SHAPE_COLORS[node.shape](shape_text)

    parts: list[str] = [f"{node.label}: {shape_text}" if node.label else shape_text]
    if node.shape is ShapeTag.SCALAR:
        value = node.value
        if isinstance(value, TextHint):
            parts.append(f"<{value.tag}>")
            value = value.text
        preview: str = repr(value)
        if len(preview) > SCALAR_PREVIEW_WIDTH:
            preview = preview[: SCALAR_PREVIEW_WIDTH - 3] + "..."
        parts.append(preview)
    elif node.shape is not ShapeTag.MAPPING:
        parts.append(f"({len(rows_of(node.value))})")
    if node.header:
        parts.append("[header]")
    return " ".join(parts)


@click.command(
    name="inspect",
    help="Show the shape outline of JSON or TOML documents.",
)
@click.argument("files", nargs=-1, type=str)
@input_format_option
@click.option(
    "--each",
    is_flag=True,
    default=False,
    help="Inspect the items of a top-level list as separate values.",
)
def inspect_command(*, files: tuple[str, ...], input_format: str | None, each: bool) -> None:
    """Print the shape outline of the given documents.

    Args:
        files (tuple[str, ...]): Input paths, or ``-`` for STDIN.
        input_format (str | None): Explicit input format.
        each (bool): Split a top-level list into separate values.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    color: bool = bool(ctx.obj.get("color_enabled", False))

    for value in read_values(files, input_format, each=each):
        for node in walk_shapes(value):
            console.print("  " * node.depth + describe_node(node, color=color))
