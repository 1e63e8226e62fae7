"""Turn a sanitized annex table into records keyed by the column schema."""

from __future__ import annotations

from typing import Optional

from eurlex_food_controls.config import ColumnSchema
from eurlex_food_controls.errors import SchemaMismatchError
from eurlex_food_controls.models import RawRecord, Table
from eurlex_food_controls.table.markers import parse_span


def _span(value: Optional[str]) -> int:
    return max(1, parse_span(value) or 1)


def _take_carried(
    values: list[str],
    carried: dict[int, tuple[str, int]],
    next_carried: dict[int, tuple[str, int]],
) -> None:
    while len(values) in carried:
        col = len(values)
        text, rows_left = carried.pop(col)
        values.append(text)
        if rows_left > 1:
            next_carried[col] = (text, rows_left - 1)


def expand_spans(table: Table) -> list[list[str]]:
    """
    Lay the table out on a logical grid.

    A cell spanning n columns is repeated n times; a cell spanning n rows is
    carried into the same column of the next n-1 rows.
    """
    grid: list[list[str]] = []
    carried: dict[int, tuple[str, int]] = {}

    for row in table.rows:
        values: list[str] = []
        next_carried: dict[int, tuple[str, int]] = {}

        for cell in row:
            _take_carried(values, carried, next_carried)
            rowspan = _span(cell.rowspan)
            for _ in range(_span(cell.colspan)):
                if rowspan > 1:
                    next_carried[len(values)] = (cell.text, rowspan - 1)
                values.append(cell.text)

        _take_carried(values, carried, next_carried)
        for col in sorted(carried):
            text, rows_left = carried[col]
            if rows_left > 1:
                next_carried[len(values)] = (text, rows_left - 1)
            values.append(text)

        grid.append(values)
        carried = next_carried

    return grid


def extract_records(table: Table, schema: ColumnSchema, regulation: str | None = None) -> list[RawRecord]:
    """Bind each logical row positionally to the schema's column names."""
    grid = expand_spans(table)
    for index, values in enumerate(grid):
        if len(values) != len(schema):
            raise SchemaMismatchError(index, len(schema), len(values), regulation)
    return [dict(zip(schema.names, values)) for values in grid]


def slice_body(records: list[RawRecord], head: int = 0, tail: int = 0) -> list[RawRecord]:
    """Drop leading title/header rows and trailing footer rows."""
    end = len(records) - tail if tail else len(records)
    return records[head:end]
