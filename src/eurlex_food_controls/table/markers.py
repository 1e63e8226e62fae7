"""Detect malformed rows and revision-marker cells in an annex table."""

from __future__ import annotations

import logging
from typing import Optional

from eurlex_food_controls.cleaning import filter_decorative, normalize_text
from eurlex_food_controls.models import MarkerSet, Table, TableRow

logger = logging.getLogger(__name__)

DEFAULT_SPAN = "1"


def parse_span(value: Optional[str]) -> Optional[int]:
    """Parse a colspan/rowspan value; `None` means the value is present but not an integer."""
    if value is None:
        value = DEFAULT_SPAN
    try:
        return int(value)
    except ValueError:
        return None


def is_malformed_row(row: TableRow) -> bool:
    return any(parse_span(cell.colspan) is None for cell in row)


def find_malformed_rows(table: Table) -> list[int]:
    """Return the original indices of rows whose colspan cannot be parsed."""
    indices = [index for index, row in enumerate(table.rows) if is_malformed_row(row)]
    if indices:
        logger.debug("Malformed rows at original indices %s", indices)
    return indices


def removal_order(indices: list[int]) -> list[int]:
    """
    Translate original row indices into a sequential deletion order.

    Deleting row i shifts every later row down by one, so the k-th target
    (ascending) is decremented by the number of rows already removed.
    """
    return [index - position for position, index in enumerate(sorted(set(indices)))]


def extract_marker_texts(table: Table) -> MarkerSet:
    """Collect the text of every revision-marker cell, normalized like Food values."""
    texts = set()
    for row in table.rows:
        for cell in row:
            if not cell.is_marker:
                continue
            text = normalize_text(filter_decorative(cell.text))
            if text:
                texts.add(text)
    return frozenset(texts)
