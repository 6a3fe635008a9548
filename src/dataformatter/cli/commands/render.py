# topmark:header:start
#
#   project      : DataFormatter
#   file         : render.py
#   file_relpath : src/dataformatter/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DataFormatter `render` command.

Reads JSON or TOML documents and writes them as HTML. Formatting options are
resolved as defaults < ``--config`` file < command-line flags.

Examples:
    ```sh
    dataformatter render report.json > report.html
    dataformatter render --content-only --border 0 --expand-last-column recipes.toml
    echo '[["a", "b"], ["c", "d"]]' | dataformatter render --content-only -
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from tomlkit.exceptions import TOMLKitError

from dataformatter.cli.errors import (
    DataFormatterConfigError,
    DataFormatterIOError,
    DataFormatterStructureError,
)
from dataformatter.cli.inputs import input_format_option, read_values
from dataformatter.cli.options import formatting_options
from dataformatter.config.logging import get_logger
from dataformatter.config.options import FormattingOptions
from dataformatter.constants import DEFAULT_DOCUMENT_TITLE
from dataformatter.core.errors import StructureTooDeep
from dataformatter.rendering.document import HtmlFormatter

if TYPE_CHECKING:
    from dataformatter.cli.console import ConsoleLike
    from dataformatter.config.logging import DataFormatterLogger

logger: DataFormatterLogger = get_logger(__name__)


def resolve_options(config_path: Path | None, **overrides: Any) -> FormattingOptions:
    """Build the effective formatting options.

    Args:
        config_path (Path | None): Optional TOML file with a ``[formatting]`` table.
        **overrides (Any): Command-line values; ``None`` means "not given".

    Returns:
        FormattingOptions: The merged options.

    Raises:
        DataFormatterConfigError: If the config file cannot be read or parsed, or the
            merged options are invalid.
    """
    base = FormattingOptions()
    if config_path is not None:
        try:
            base = FormattingOptions.from_toml_file(config_path, strict=True)
        except (OSError, UnicodeDecodeError, TOMLKitError) as exc:
            raise DataFormatterConfigError(f"Cannot load config {config_path}: {exc}") from exc
    try:
        return base.with_overrides(**overrides)
    except (TypeError, ValueError) as exc:
        raise DataFormatterConfigError(f"Invalid formatting options: {exc}") from exc


@click.command(
    name="render",
    help="Render JSON or TOML documents as HTML. Use '-' to read a document from STDIN.",
)
@click.argument("files", nargs=-1, type=str)
@input_format_option
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with a [formatting] table.",
)
@formatting_options
@click.option(
    "--content-only",
    is_flag=True,
    default=False,
    help="Omit the <html>/<head>/<body> document boilerplate.",
)
@click.option(
    "--title",
    type=str,
    default=DEFAULT_DOCUMENT_TITLE,
    show_default=True,
    help="Document title.",
)
@click.option(
    "--each",
    is_flag=True,
    default=False,
    help="Render the items of a top-level list as separate values.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the HTML to this file instead of STDOUT.",
)
def render_command(
    *,
    files: tuple[str, ...],
    input_format: str | None,
    config_path: Path | None,
    content_only: bool,
    title: str,
    each: bool,
    output: Path | None,
    **formatting: Any,
) -> None:
    """Render documents as HTML.

    Args:
        files (tuple[str, ...]): Input paths, or ``-`` for STDIN.
        input_format (str | None): Explicit input format.
        config_path (Path | None): Optional TOML configuration file.
        content_only (bool): Omit document boilerplate.
        title (str): Document title.
        each (bool): Split a top-level list into separate values.
        output (Path | None): Output file; STDOUT when None.
        **formatting (Any): Formatting flags (see `formatting_options`).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = int(ctx.obj.get("verbosity_level", 0))

    options: FormattingOptions = resolve_options(config_path, **formatting)
    logger.debug("Effective formatting options: %r", options)

    values: list[Any] = read_values(files, input_format, each=each)

    # Render into memory first so a failure never leaves a truncated document behind
    formatter = HtmlFormatter(content_only=content_only, options=options, title=title)
    try:
        with formatter:
            formatter.out(*values)
    except StructureTooDeep as exc:
        raise DataFormatterStructureError(str(exc)) from exc
    html_text: str = formatter.getvalue()

    if output is None:
        console.print(html_text, nl=False)
    else:
        try:
            output.write_text(html_text, encoding="utf-8")
        except OSError as exc:
            raise DataFormatterIOError(f"Cannot write {output}: {exc}") from exc
        if verbosity > 0:
            console.warn(f"Wrote {len(values)} value(s) to {output}")
