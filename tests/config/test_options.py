# topmark:header:start
#
#   project      : DataFormatter
#   file         : test_options.py
#   file_relpath : tests/config/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `dataformatter.config.options.FormattingOptions` and TOML loading."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest
from tomlkit.exceptions import TOMLKitError

from dataformatter.config.io import get_int_value, get_string_value, load_toml_dict
from dataformatter.config.options import FormattingOptions

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """Defaults match the documented option table."""
    options = FormattingOptions()
    assert options.table_border == 1
    assert options.table_spacing == 1
    assert options.table_width == ""
    assert options.table_expand_right_col is False
    assert options.escape_text is False
    assert options.max_depth is None


def test_options_are_frozen() -> None:
    """Options cannot be changed once built."""
    options = FormattingOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.table_border = 5  # type: ignore[misc]


def test_from_mapping_accepts_aliases_and_field_names() -> None:
    """camelCase configuration names and snake_case field names both work."""
    options = FormattingOptions.from_mapping(
        {"tableBorder": 0, "table_spacing": 3, "tableWidth": "100%", "tableExpandRightCol": True}
    )
    assert options == FormattingOptions(
        table_border=0, table_spacing=3, table_width="100%", table_expand_right_col=True
    )


def test_from_mapping_ignores_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are logged and skipped."""
    options = FormattingOptions.from_mapping({"tableColour": "red"})
    assert options == FormattingOptions()
    assert "tableColour" in caplog.text


def test_from_mapping_bad_types_fall_back(caplog: pytest.LogCaptureFixture) -> None:
    """Values of the wrong type keep the default and log a warning."""
    options = FormattingOptions.from_mapping(
        {"tableBorder": "thick", "tableSpacing": True, "maxDepth": 0, "tableWidth": 640}
    )
    assert options.table_border == 1
    assert options.table_spacing == 1
    assert options.max_depth is None
    assert options.table_width == "640"
    assert "thick" in caplog.text


def test_max_depth_must_be_positive() -> None:
    """A non-positive max_depth is rejected at construction."""
    with pytest.raises(ValueError):
        FormattingOptions(max_depth=0)


def test_with_overrides_skips_none() -> None:
    """Overrides replace only the values that were given."""
    base = FormattingOptions(table_border=2, table_width="50%")
    merged = base.with_overrides(table_border=None, tableWidth="75%", escape_text=True)
    assert merged == FormattingOptions(table_border=2, table_width="75%", escape_text=True)
    assert base.table_width == "50%"


def test_to_dict_round_trips_through_from_mapping() -> None:
    """The camelCase dict form builds equal options."""
    options = FormattingOptions(table_border=0, table_expand_right_col=True, max_depth=9)
    assert options.to_dict()["tableBorder"] == 0
    assert FormattingOptions.from_mapping(options.to_dict()) == options
    assert "maxDepth" not in FormattingOptions().to_dict()


def test_from_toml_file(tmp_path: Path) -> None:
    """The [formatting] table of a TOML file is read."""
    path: Path = tmp_path / "dataformatter.toml"
    path.write_text(
        "[formatting]\n"
        "tableBorder = 0\n"
        "tableSpacing = 2\n"
        "tableExpandRightCol = true\n"
        "maxDepth = 64\n",
        encoding="utf-8",
    )
    options = FormattingOptions.from_toml_file(path)
    assert options == FormattingOptions(
        table_border=0, table_spacing=2, table_expand_right_col=True, max_depth=64
    )


def test_from_toml_file_without_table(tmp_path: Path) -> None:
    """A file without a [formatting] table gives the defaults."""
    path: Path = tmp_path / "other.toml"
    path.write_text('title = "x"\n', encoding="utf-8")
    assert FormattingOptions.from_toml_file(path) == FormattingOptions()


def test_load_toml_dict_errors_are_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Missing or malformed files give an empty table."""
    assert load_toml_dict(tmp_path / "missing.toml") == {}
    broken: Path = tmp_path / "broken.toml"
    broken.write_text("[formatting\n", encoding="utf-8")
    assert load_toml_dict(broken) == {}
    assert "broken.toml" in caplog.text


def test_getters() -> None:
    """Typed getters reject booleans as integers and coerce numbers to text."""
    table = {"flag": True, "n": 3, "f": 1.5}
    assert get_int_value(table, "flag", 7) == 7
    assert get_int_value(table, "n", 7) == 3
    assert get_int_value(table, "missing", 7) == 7
    assert get_string_value(table, "f") == "1.5"
    assert get_string_value(table, "flag", "d") == "d"


def test_from_toml_file_strict_raises(tmp_path: Path) -> None:
    """In strict mode, missing and malformed files raise instead of giving defaults."""
    broken: Path = tmp_path / "broken.toml"
    broken.write_text("[formatting\n", encoding="utf-8")
    assert FormattingOptions.from_toml_file(broken) == FormattingOptions()
    with pytest.raises(TOMLKitError):
        FormattingOptions.from_toml_file(broken, strict=True)
    with pytest.raises(OSError):
        FormattingOptions.from_toml_file(tmp_path / "missing.toml", strict=True)
