# topmark:header:start
#
#   project      : DataFormatter
#   file         : options.py
#   file_relpath : src/dataformatter/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting options threaded through every render call.

`FormattingOptions` is an immutable snapshot. It is built once for a top-level
render call (from defaults, a TOML ``[formatting]`` table, a plain mapping, or
CLI flags) and handed unchanged to every recursive step, so a table nested in
another table's cell uses the same border, spacing and width as its ancestor.

Option names are accepted both as Python field names (``table_border``) and as
the camelCase names used in configuration files (``tableBorder``).
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Final

from dataformatter.config.io import (
    get_bool_value,
    get_int_value,
    get_int_value_or_none,
    get_string_value,
    get_table_value,
    load_toml_dict,
    parse_toml_text,
)
from dataformatter.config.logging import get_logger
from dataformatter.constants import FORMATTING_TABLE

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from dataformatter.config.io import TomlTable
    from dataformatter.config.logging import DataFormatterLogger

logger: DataFormatterLogger = get_logger(__name__)

# camelCase configuration names -> dataclass field names
OPTION_ALIASES: Final[dict[str, str]] = {
    "tableBorder": "table_border",
    "tableSpacing": "table_spacing",
    "tableWidth": "table_width",
    "tableExpandRightCol": "table_expand_right_col",
    "escapeText": "escape_text",
    "maxDepth": "max_depth",
}


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Immutable formatting options for one render call.

    Attributes:
        table_border (int): ``border`` attribute of every rendered table. Defaults to 1.
        table_spacing (int): ``cellspacing`` attribute of every rendered table. Defaults to 1.
        table_width (str): ``width`` attribute of every rendered table; empty means
            unconstrained. Defaults to ``""``.
        table_expand_right_col (bool): If True, the last cell of every row stretches
            to fill the remaining width. Defaults to False.
        escape_text (bool): If True, scalar text and mapping keys are HTML-escaped.
            Defaults to False (text is trusted and emitted verbatim).
        max_depth (int | None): Maximum nesting depth before `StructureTooDeep`
            is raised. ``None`` (default) means unbounded.
    """

    table_border: int = 1
    table_spacing: int = 1
    table_width: str = ""
    table_expand_right_col: bool = False
    escape_text: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> FormattingOptions:
        """Build options from a mapping of option names to values.

        Keys may use either the field names or their camelCase aliases. Unknown
        keys are logged and ignored; values of the wrong type fall back to the
        default (see `dataformatter.config.io`).

        Args:
            mapping (Mapping[str, Any]): Option values, e.g. ``{"tableBorder": 0}``.

        Returns:
            FormattingOptions: The resulting options.
        """
        known: set[str] = {f.name for f in fields(cls)}
        table: TomlTable = {}
        for key, value in mapping.items():
            name: str = OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown formatting option %r", key)
                continue
            table[name] = value

        defaults = cls()
        max_depth: int | None = get_int_value_or_none(table, "max_depth")
        if max_depth is not None and max_depth < 1:
            logger.warning("Ignoring non-positive max_depth %r", max_depth)
            max_depth = None

        return cls(
            table_border=get_int_value(table, "table_border", defaults.table_border),
            table_spacing=get_int_value(table, "table_spacing", defaults.table_spacing),
            table_width=get_string_value(table, "table_width", defaults.table_width),
            table_expand_right_col=get_bool_value(
                table, "table_expand_right_col", defaults.table_expand_right_col
            ),
            escape_text=get_bool_value(table, "escape_text", defaults.escape_text),
            max_depth=max_depth,
        )

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> FormattingOptions:
        """Build options from the ``[formatting]`` table of a TOML file.

        A file without a ``[formatting]`` table yields the defaults. A missing,
        unreadable or malformed file also yields the defaults (the problem is
        logged) unless ``strict`` is set.

        Args:
            path (Path): Path to the TOML file.
            strict (bool): If True, read and parse errors are raised.

        Returns:
            FormattingOptions: The resulting options.

        Raises:
            OSError: If ``strict`` and the file cannot be read.
            TOMLKitError: If ``strict`` and the file is not valid TOML.
        """
        doc: TomlTable = (
            parse_toml_text(path.read_text(encoding="utf-8")) if strict else load_toml_dict(path)
        )
        table: TomlTable = get_table_value(doc, FORMATTING_TABLE)
        logger.debug("Loaded formatting options from %s: %r", path, table)
        return cls.from_mapping(table)

    def with_overrides(self, **overrides: Any) -> FormattingOptions:
        """Return a copy with the given fields replaced.

        ``None`` values are skipped so unset CLI flags leave the current value in place.
        Aliases are accepted as for `from_mapping`.

        Returns:
            FormattingOptions: A new frozen snapshot.
        """
        changes: dict[str, Any] = {
            OPTION_ALIASES.get(k, k): v for k, v in overrides.items() if v is not None
        }
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return the options keyed by their camelCase configuration names.

        ``max_depth`` is omitted when unbounded, since TOML has no null value.
        """
        out: dict[str, Any] = {}
        for alias, name in OPTION_ALIASES.items():
            value = getattr(self, name)
            if value is not None:
                out[alias] = value
        return out
