"""Remove malformed rows from an annex table."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from eurlex_food_controls.models import MarkerSet, Table
from eurlex_food_controls.table.markers import extract_marker_texts, find_malformed_rows, removal_order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedTable:
    """Sanitized table plus the markers captured from the original one."""

    table: Table
    markers: MarkerSet
    removed: tuple[int, ...]


def sanitize_table(table: Table, indices: list[int]) -> Table:
    """Return a copy of `table` without the rows at the given original indices."""
    rows = list(table.rows)
    for index in removal_order(indices):
        del rows[index]
    return Table(rows=tuple(rows))


def prepare_table(table: Table) -> PreparedTable:
    """Capture marker texts, then drop malformed rows."""
    markers = extract_marker_texts(table)
    removed = find_malformed_rows(table)
    sanitized = sanitize_table(table, removed)
    logger.info(
        "Sanitized table: %d rows, %d removed, %d marker texts",
        len(table),
        len(removed),
        len(markers),
    )
    return PreparedTable(table=sanitized, markers=markers, removed=tuple(removed))
