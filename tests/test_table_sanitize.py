"""Tests for malformed-row detection, marker capture and table sanitization."""

from __future__ import annotations

from bs4 import BeautifulSoup

from eurlex_food_controls.models import Table, TableCell
from eurlex_food_controls.records import filter_markers
from eurlex_food_controls.table.document import get_cell_text, is_marker_cell, table_from_tag
from eurlex_food_controls.table.markers import (
    extract_marker_texts,
    find_malformed_rows,
    parse_span,
    removal_order,
)
from eurlex_food_controls.table.sanitize import prepare_table, sanitize_table


def _row(*texts: str, colspan: str | None = None, is_marker: bool = False) -> tuple[TableCell, ...]:
    return tuple(TableCell(text=text, colspan=colspan, is_marker=is_marker) for text in texts)


def test_parse_span_defaults_and_failures() -> None:
    assert parse_span(None) == 1
    assert parse_span("3") == 3
    assert parse_span("") is None
    assert parse_span("two") is None


def test_clean_table_has_no_removals_and_sanitize_is_noop() -> None:
    table = Table(rows=(_row("a", "b"), _row("c", "d", colspan="1")))

    assert find_malformed_rows(table) == []
    assert sanitize_table(table, []) == table


def test_malformed_rows_are_reported_by_original_index() -> None:
    table = Table(
        rows=(
            _row("r0"),
            _row("r1", colspan=""),
            _row("r2"),
            _row("r3", colspan="x"),
            _row("r4"),
        )
    )

    removed = find_malformed_rows(table)
    sanitized = sanitize_table(table, removed)

    assert removed == [1, 3]
    assert len(sanitized) == len(table) - len(removed)
    assert [row[0].text for row in sanitized.rows] == ["r0", "r2", "r4"]
    assert len(table) == 5


def test_removal_order_corrects_for_index_shift() -> None:
    assert removal_order([1, 3]) == [1, 2]
    assert removal_order([4, 0, 2]) == [0, 1, 2]
    assert removal_order([]) == []


def test_extract_marker_texts_uses_cell_flag_not_content() -> None:
    table = Table(
        rows=(
            _row(" ▼M3 \n", is_marker=True),
            _row("▼M5"),
            _row("", is_marker=True),
        )
    )

    assert extract_marker_texts(table) == frozenset({"M3"})


def test_prepare_table_captures_markers_from_removed_rows() -> None:
    table = Table(
        rows=(
            _row("header"),
            (TableCell(text="▼M7", colspan="", is_marker=True),),
            _row("data"),
        )
    )

    prepared = prepare_table(table)

    assert prepared.markers == frozenset({"M7"})
    assert prepared.removed == (1,)
    assert [row[0].text for row in prepared.table.rows] == ["header", "data"]


def test_table_from_tag_reads_spans_markers_and_lines() -> None:
    html = """
    <table>
      <tbody>
        <tr><td colspan="2"><p class="modref">▼M1</p></td></tr>
        <tr><td colspan="">broken</td><td>x</td></tr>
        <tr>
          <td rowspan="2"><p>Dried <span>figs</span></p></td>
          <td><p>0804 20 90</p><p>0804 20 10<br/>0804 20 20</p></td>
        </tr>
        <tr><td><table><tr><td>nested</td></tr></table></td></tr>
      </tbody>
    </table>
    """
    tag = BeautifulSoup(html, "lxml").find("table")

    table = table_from_tag(tag)

    assert len(table) == 4
    assert table.rows[0][0].is_marker is True
    assert table.rows[0][0].colspan == "2"
    assert table.rows[1][0].colspan == ""
    assert table.rows[2][0].text == "Dried figs"
    assert table.rows[2][0].rowspan == "2"
    assert table.rows[2][1].text == "0804 20 90\n0804 20 10\n0804 20 20"
    assert find_malformed_rows(table) == [1]


def test_is_marker_cell_checks_cell_and_descendant_classes() -> None:
    soup = BeautifulSoup(
        '<table><tr><td class="arrow">▼B</td><td><span class="modref">►M2</span></td><td>plain</td></tr></table>',
        "lxml",
    )
    cells = soup.find_all("td")

    assert [is_marker_cell(cell) for cell in cells] == [True, True, False]
    assert get_cell_text(cells[2]) == "plain"


def test_marker_text_matches_normalized_food_value() -> None:
    table = Table(rows=(_row("▼M3 — C1", is_marker=True),))

    markers = extract_marker_texts(table)

    assert markers == frozenset({"M3 C1"})
    assert filter_markers([{"Food": "M3 C1", "Code": "1"}], markers) == []
