# topmark:header:start
#
#   project      : DataFormatter
#   file         : options.py
#   file_relpath : src/dataformatter/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, formatting) and
their resolution logic, so commands and the group stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, TypeVar

import click

from dataformatter.cli.errors import DataFormatterUsageError

F = TypeVar("F", bound=Callable[..., object])


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity level: negative when quiet, 0 by default, positive when verbose.

    Raises:
        DataFormatterUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DataFormatterUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    return verbose_count - quiet_count


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: F) -> F:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def formatting_options(f: F) -> F:
    """Add the table and text formatting options to a command.

    Every option defaults to ``None`` so that only flags given on the command line
    override the values from ``--config``.
    """
    f = click.option(
        "--border",
        "table_border",
        type=click.IntRange(min=0),
        default=None,
        help="Table border width (default: 1).",
    )(f)
    f = click.option(
        "--spacing",
        "table_spacing",
        type=click.IntRange(min=0),
        default=None,
        help="Table cell spacing (default: 1).",
    )(f)
    f = click.option(
        "--width",
        "table_width",
        type=str,
        default=None,
        help="Table width attribute, e.g. '100%' (default: unconstrained).",
    )(f)
    f = click.option(
        "--expand-last-column/--no-expand-last-column",
        "table_expand_right_col",
        default=None,
        help="Stretch the last cell of every table row to the remaining width.",
    )(f)
    f = click.option(
        "--escape/--no-escape",
        "escape_text",
        default=None,
        help="HTML-escape scalar text (default: emit text verbatim).",
    )(f)
    f = click.option(
        "--max-depth",
        "max_depth",
        type=click.IntRange(min=1),
        default=None,
        help="Fail when the input nests deeper than this (default: unbounded).",
    )(f)
    return f
