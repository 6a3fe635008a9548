# topmark:header:start
#
#   project      : DataFormatter
#   file         : test_html_render.py
#   file_relpath : tests/rendering/test_html_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the recursive HTML renderer in `dataformatter.rendering.html`."""

from __future__ import annotations

import re
from typing import Any

import pytest

from dataformatter.config.options import FormattingOptions
from dataformatter.core.errors import StructureTooDeep
from dataformatter.core.markers import Emphasized, HeaderCell, Heading, OrderedList
from dataformatter.rendering.html import iter_fragments, render


def html(value: Any, options: FormattingOptions | None = None) -> str:
    """Render ``value`` and join the fragments without separators."""
    return "".join(render(value, options))


@pytest.mark.parametrize("value", ["Hello", 42, 3.25, "with spaces  "])
def test_scalar_is_plain_text(value: Any) -> None:
    """Scalars render as their text with no tags around them."""
    fragments: list[str] = render(value)
    assert fragments == [str(value)]
    assert "<" not in "".join(fragments)


def test_none_renders_empty() -> None:
    """None is shown as an empty string."""
    assert render(None) == [""]


def test_unordered_list() -> None:
    """A list of scalars becomes one <ul> with an <li> per item."""
    assert html(["One", "Two", "Three"]) == "<ul><li>One</li><li>Two</li><li>Three</li></ul>"


def test_ordered_list() -> None:
    """`OrderedList` uses <ol> with the same items as the unordered form."""
    ordered: str = html(OrderedList(["One", "Two", "Three"]))
    unordered: str = html(["One", "Two", "Three"])
    assert ordered == "<ol><li>One</li><li>Two</li><li>Three</li></ol>"
    assert ordered[4:-5] == unordered[4:-5]


def test_list_item_count() -> None:
    """n scalar items give exactly n item wrappers inside one list container."""
    out: str = html([str(i) for i in range(7)])
    assert out.count("<ul>") == 1
    assert out.count("<li>") == out.count("</li>") == 7


def test_nested_list_is_not_item_wrapped() -> None:
    """A nested list goes directly inside the parent list."""
    assert html(["A", ["B", "C"]]) == "<ul><li>A</li><ul><li>B</li><li>C</li></ul></ul>"


def test_nested_ordered_list_is_not_item_wrapped() -> None:
    """Ordered lists nested in a list are emitted directly as well."""
    assert html(["A", OrderedList(["B"])]) == "<ul><li>A</li><ol><li>B</li></ol></ul>"


def test_mapping_inside_list_is_item_wrapped() -> None:
    """Non-list containers inside a list are wrapped in <li>."""
    assert html(["A", {"k": "v"}]) == "<ul><li>A</li><li><dl><dt>k</dt><dd>v</dd></dl></li></ul>"


def test_mapping_sorted_by_key() -> None:
    """Definition list terms are emitted in ascending key order."""
    first: str = html({"bob": 12, "joe": 34})
    second: str = html({"joe": 34, "bob": 12})
    assert first == second
    assert first == "<dl><dt>bob</dt><dd>12</dd><dt>joe</dt><dd>34</dd></dl>"


def test_mapping_keys_sort_lexicographically() -> None:
    """Keys compare as text, so '10' sorts before '9' and uppercase before lowercase."""
    out: str = html({"b": 1, "9": 2, "10": 3, "B": 4})
    assert re.findall(r"<dt>(.*?)</dt>", out) == ["10", "9", "B", "b"]


def test_mixed_type_keys_with_equal_text() -> None:
    """Keys whose text is equal are ordered by type, not by insertion order."""
    first: str = html({1: "int", "1": "str"})
    second: str = html({"1": "str", 1: "int"})
    assert first == second
    assert first == "<dl><dt>1</dt><dd>int</dd><dt>1</dt><dd>str</dd></dl>"


def test_table() -> None:
    """A list of lists renders as a table with one row per inner list."""
    out: str = html([["H1", "H2"], ["a", "b"]], FormattingOptions(table_border=1))
    assert out == (
        '<table border="1" cellspacing="1" width="">'
        '<tr><td valign="top">H1</td><td valign="top">H2</td></tr>'
        '<tr><td valign="top">a</td><td valign="top">b</td></tr>'
        "</table>"
    )
    assert out.count("<table") == 1
    assert out.count("<tr>") == 2


def test_header_cells() -> None:
    """Header-marked cells use <th>; all other cells use <td>."""
    out: str = html([[HeaderCell("Name"), "plain"], ["x", HeaderCell("y")]])
    assert re.findall(r"<(t[hd])[ >]", out) == ["th", "td", "td", "th"]
    assert '<th valign="top">Name</th>' in out
    assert '<th valign="top">y</th>' in out


def test_table_attributes_from_options() -> None:
    """Border, spacing and width come from the options."""
    options = FormattingOptions(table_border=0, table_spacing=4, table_width="80%")
    out: str = html([["a"]], options)
    assert out.startswith('<table border="0" cellspacing="4" width="80%">')


def test_expand_last_column() -> None:
    """Only the last cell of each row gets width=100% when requested."""
    options = FormattingOptions(table_expand_right_col=True)
    out: str = html([["a", "b"], ["c", HeaderCell("d")]], options)
    assert out.count('width="100%"') == 2
    assert '<td valign="top">a</td><td valign="top" width="100%">b</td>' in out
    assert '<th valign="top" width="100%">d</th>' in out


def test_ragged_rows() -> None:
    """Rows may have different lengths; each row's own last cell is expanded."""
    options = FormattingOptions(table_expand_right_col=True)
    out: str = html([["a"], ["b", "c", "d"]], options)
    assert '<tr><td valign="top" width="100%">a</td></tr>' in out
    assert '<td valign="top">c</td><td valign="top" width="100%">d</td>' in out


def test_ordered_list_rows_in_table() -> None:
    """An `OrderedList` row contributes its items as cells."""
    out: str = html([OrderedList(["a", "b"]), ["c", "d"]])
    assert out.count("<td") == 4
    assert "<ol>" not in out


def test_options_propagate_to_nested_tables() -> None:
    """A table inside a table cell uses the same options as its ancestor."""
    options = FormattingOptions(table_border=3, table_spacing=2, table_width="50%")
    out: str = html([["outer", [["inner"]]]], options)
    assert out.count('<table border="3" cellspacing="2" width="50%">') == 2


def test_nested_structures_in_cells(recipes: dict[str, Any]) -> None:
    """Mappings of tables whose cells hold ordered lists render fully nested."""
    out: str = html(recipes)
    assert out.startswith("<dl><dt>Peanutbutter and Jam Sandwich</dt><dd><table")
    assert out.index("Peanutbutter") < out.index("Zack's")
    assert out.count("<table") == 2
    assert out.count("<th ") == 6
    assert '<td valign="top"><ol><li>Crack</li><li>Pour</li></ol></td>' in out
    assert out.endswith("</table></dd></dl>")


def test_header_marker_outside_table_is_transparent() -> None:
    """A header marker in a list renders like its inner value."""
    assert html(["a", HeaderCell("b")]) == "<ul><li>a</li><li>b</li></ul>"


def test_text_hints() -> None:
    """Headings and emphasized text are wrapped in their tags."""
    assert render(Heading("Test Results")) == ["<h1>Test Results</h1>"]
    assert html(["ok", Emphasized("Cannot find file!")]) == (
        "<ul><li>ok</li><li><em>Cannot find file!</em></li></ul>"
    )


def test_text_is_verbatim_by_default() -> None:
    """Markup characters in text pass through unless escaping is enabled."""
    assert html(["<b>bold</b> & co"]) == "<ul><li><b>bold</b> & co</li></ul>"


def test_escape_text() -> None:
    """With escape_text, scalars and mapping keys are HTML-escaped."""
    options = FormattingOptions(escape_text=True)
    assert html({"<k>": ["a & b", Heading("<x>")]}, options) == (
        "<dl><dt>&lt;k&gt;</dt><dd>"
        "<ul><li>a &amp; b</li><li><h1>&lt;x&gt;</h1></li></ul>"
        "</dd></dl>"
    )


def test_rendering_is_deterministic(recipes: dict[str, Any]) -> None:
    """Two renders of equal input give identical output."""
    assert render(recipes) == render(dict(reversed(list(recipes.items()))))


def test_input_is_not_mutated(recipes: dict[str, Any]) -> None:
    """Rendering leaves the caller's data untouched."""
    snapshot: str = repr(recipes)
    render(recipes)
    assert repr(recipes) == snapshot


def test_iter_fragments_matches_render() -> None:
    """The lazy and eager entry points produce the same fragments."""
    value = {"a": [["x", "y"]], "b": OrderedList([1, 2])}
    assert list(iter_fragments(value)) == render(value)


def test_fragments_are_balanced() -> None:
    """Every opening structural tag has a matching closing tag."""
    value = {"a": [["x", ["y", OrderedList(["z"])]], [{"k": "v"}]], "b": ["c", ["d"]]}
    out: str = html(value)
    for tag in ("ul", "ol", "li", "dl", "dt", "dd", "table", "tr", "td"):
        assert len(re.findall(rf"<{tag}[ >]", out)) == out.count(f"</{tag}>"), tag


def test_max_depth_within_limit() -> None:
    """Values nested up to the limit render normally."""
    options = FormattingOptions(max_depth=3)
    assert html(["a", ["b"]], options) == "<ul><li>a</li><ul><li>b</li></ul></ul>"


def test_max_depth_exceeded() -> None:
    """Crossing the depth limit raises StructureTooDeep."""
    options = FormattingOptions(max_depth=2)
    with pytest.raises(StructureTooDeep) as excinfo:
        render(["a", ["b"]], options)
    assert excinfo.value.limit == 2
    assert excinfo.value.depth == 3


def test_cyclic_input_is_reported_with_depth_limit() -> None:
    """A self-referencing list is caught by the depth limit."""
    cyclic: list[Any] = ["a"]
    cyclic.append(cyclic)
    with pytest.raises(StructureTooDeep):
        render(cyclic, FormattingOptions(max_depth=50))
