# topmark:header:start
#
#   project      : DataFormatter
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking DataFormatter through Click's test runner.

Commands are invoked with ``--no-color`` so output can be compared verbatim.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from dataformatter.cli.exit_codes import ExitCode
from dataformatter.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (Sequence[str]): Arguments after the program name, e.g. ``["render", "a.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for ``-``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["render", "--content-only", "-"], input_text="[1, 2]")
        assert_SUCCESS(result)
        ```
    """
    return CliRunner().invoke(cli, ["--no-color", *argv], input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited with SUCCESS (0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The CLI result.
        code (ExitCode): The expected exit code.
    """
    assert result.exit_code == code, result.output
