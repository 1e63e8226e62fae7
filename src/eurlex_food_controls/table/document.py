"""Locate the annex table in a EUR-Lex document and snapshot it as a `Table`."""

from __future__ import annotations

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from eurlex_food_controls.cleaning import normalize_text
from eurlex_food_controls.config import DEFAULT_MARKER_CLASSES
from eurlex_food_controls.errors import LocatorMissError
from eurlex_food_controls.models import Table, TableCell


def parse_document(html_content: str) -> BeautifulSoup:
    return BeautifulSoup(html_content, "lxml")


def locate_table(soup: BeautifulSoup | Tag, locator: str, regulation: str | None = None) -> Tag:
    """Return the first table matched by a CSS selector.

    A selector that matches a container (e.g. the annex `div`) resolves to the
    first table inside it.
    """
    match = soup.select_one(locator)
    if match is not None and match.name != "table":
        match = match.find("table")
    if match is None:
        raise LocatorMissError(locator, regulation)
    return match


def _block_lines(block: Tag) -> list[str]:
    lines: list[str] = []
    current: list[str] = []
    for node in block.descendants:
        if isinstance(node, Tag) and node.name == "br":
            lines.append("".join(current))
            current = []
        elif isinstance(node, NavigableString) and not isinstance(node, Comment):
            current.append(str(node))
    lines.append("".join(current))
    return [line for line in (normalize_text(raw) for raw in lines) if line]


def get_cell_text(cell: Tag) -> str:
    """
    Extract text from a table cell, one line per paragraph or `<br>` break.
    Whitespace inside a line is collapsed.
    """
    blocks = cell.find_all("p") or [cell]
    lines: list[str] = []
    for block in blocks:
        lines.extend(_block_lines(block))
    return "\n".join(lines)


def is_marker_cell(cell: Tag, marker_classes: tuple[str, ...] = DEFAULT_MARKER_CLASSES) -> bool:
    """True if the cell, or an element inside it, carries a revision-marker class."""
    classes = set(cell.get("class", []) or [])
    if classes & set(marker_classes):
        return True
    return cell.find(class_=list(marker_classes)) is not None


def _own_rows(table: Tag) -> list[Tag]:
    return [row for row in table.find_all("tr") if row.find_parent("table") is table]


def table_from_tag(table: Tag, marker_classes: tuple[str, ...] = DEFAULT_MARKER_CLASSES) -> Table:
    """Snapshot a `<table>` element, skipping rows of nested tables."""
    rows = []
    for row in _own_rows(table):
        cells = tuple(
            TableCell(
                text=get_cell_text(cell),
                colspan=cell.get("colspan"),
                rowspan=cell.get("rowspan"),
                is_marker=is_marker_cell(cell, marker_classes),
            )
            for cell in row.find_all(["td", "th"], recursive=False)
        )
        rows.append(cells)
    return Table(rows=tuple(rows))
