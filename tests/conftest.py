# topmark:header:start
#
#   project      : DataFormatter
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DataFormatter test suite.

Sets up global fixtures and logging for test runs, and provides small value
builders shared across test packages.
"""

from __future__ import annotations

from typing import Any

import pytest

from dataformatter.config import logging
from dataformatter.constants import LOG_LEVEL_ENV_VAR
from dataformatter.core.markers import HeaderCell, OrderedList


@pytest.fixture(autouse=True)
def reset_dataformatter_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear the log level env var and reset logging to TRACE before each test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    # CLI invocations reconfigure the root logger; restore TRACE for caplog-based tests
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so renderer dispatch is logged during tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def recipes() -> dict[str, Any]:
    """A mapping of tables whose cells hold ordered lists, as in a recipe book."""
    return {
        "Zack's Kickin' Banana Milkshake": [
            [HeaderCell("Ingredient"), HeaderCell("Amount"), HeaderCell("Preparation")],
            ["1% milk", "1 L", ""],
            ["Ripe Banana", "2 peeled", OrderedList(["Peel bananas", "Chop into quarters"])],
            ["Organic eggs", "1 whole", OrderedList(["Crack", "Pour"])],
        ],
        "Peanutbutter and Jam Sandwich": [
            [HeaderCell("Ingredient"), HeaderCell("Amount"), HeaderCell("Preparation")],
            ["Bread", "2 slices", ""],
        ],
    }
