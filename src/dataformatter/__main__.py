# topmark:header:start
#
#   project      : DataFormatter
#   file         : __main__.py
#   file_relpath : src/dataformatter/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DataFormatter via ``python -m dataformatter``.

Delegates to :func:`dataformatter.cli.main.cli`, the same entry point as the
``dataformatter`` console script.

Examples:
    Render a JSON document to HTML::

        python -m dataformatter render report.json
"""

from __future__ import annotations

from dataformatter.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
