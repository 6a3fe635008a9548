# topmark:header:start
#
#   project      : DataFormatter
#   file         : errors.py
#   file_relpath : src/dataformatter/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DataFormatter CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from dataformatter.cli.exit_codes import ExitCode


class DataFormatterCliError(click.ClickException):
    """Base class for all DataFormatter CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (uncolored)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class DataFormatterUsageError(DataFormatterCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DataFormatterDecodeError(DataFormatterCliError):
    """Error when an input document cannot be parsed."""

    exit_code = ExitCode.DATA_ERROR


class DataFormatterFileNotFoundError(DataFormatterCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DataFormatterStructureError(DataFormatterCliError):
    """Error when the input nests deeper than ``--max-depth``."""

    exit_code = ExitCode.STRUCTURE_ERROR


class DataFormatterIOError(DataFormatterCliError):
    """Error when reading or writing a file fails."""

    exit_code = ExitCode.IO_ERROR


class DataFormatterConfigError(DataFormatterCliError):
    """Error for invalid formatting configuration."""

    exit_code = ExitCode.CONFIG_ERROR
