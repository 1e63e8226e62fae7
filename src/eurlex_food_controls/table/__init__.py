"""Annex table handling: location, marker detection, sanitization and extraction."""

from eurlex_food_controls.table.document import get_cell_text, locate_table, parse_document, table_from_tag
from eurlex_food_controls.table.extract import expand_spans, extract_records, slice_body
from eurlex_food_controls.table.markers import (
    extract_marker_texts,
    find_malformed_rows,
    parse_span,
    removal_order,
)
from eurlex_food_controls.table.sanitize import PreparedTable, prepare_table, sanitize_table

__all__ = [
    "PreparedTable",
    "expand_spans",
    "extract_marker_texts",
    "extract_records",
    "find_malformed_rows",
    "get_cell_text",
    "locate_table",
    "parse_document",
    "parse_span",
    "prepare_table",
    "removal_order",
    "sanitize_table",
    "slice_body",
    "table_from_tag",
]
