# topmark:header:start
#
#   project      : DataFormatter
#   file         : version.py
#   file_relpath : src/dataformatter/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataFormatter `version` command.

Prints the current DataFormatter version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from dataformatter.constants import DATAFORMATTER_VERSION

if TYPE_CHECKING:
    from dataformatter.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DataFormatter.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of DataFormatter.

    Args:
        as_json (bool): Print ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": DATAFORMATTER_VERSION}))
    elif int(ctx.obj.get("verbosity_level", 0)) > 0:
        console.print(console.styled("DataFormatter version:", bold=True, underline=True))
        console.print(f"    {console.styled(DATAFORMATTER_VERSION, bold=True)}")
    else:
        console.print(console.styled(DATAFORMATTER_VERSION, bold=True))
