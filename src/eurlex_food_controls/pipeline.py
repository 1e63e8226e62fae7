"""Scraper that runs the full table pipeline for one regulation."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from eurlex_food_controls.cleaning import clean_record, finalize_codes
from eurlex_food_controls.config import RegulationConfig
from eurlex_food_controls.models import MarkerSet, RawRecord, ScrapeReport
from eurlex_food_controls.records import deduplicate, filter_markers, split_compound_fields
from eurlex_food_controls.table.document import locate_table, table_from_tag
from eurlex_food_controls.table.extract import extract_records, slice_body
from eurlex_food_controls.table.sanitize import prepare_table

logger = logging.getLogger(__name__)


class FoodTableScraper:
    """Scraper for one regulation's annex table."""

    def __init__(self, config: RegulationConfig):
        self.config = config
        self.markers: MarkerSet = frozenset()
        self.report = ScrapeReport(regulation=config.name)

    def scrape(self, soup: BeautifulSoup | Tag) -> list[RawRecord]:
        config = self.config
        schema = config.schema
        self.report = ScrapeReport(regulation=config.name)

        table_tag = locate_table(soup, config.locator, config.name)
        table = table_from_tag(table_tag, config.marker_classes)
        prepared = prepare_table(table)
        self.markers = prepared.markers

        records = extract_records(prepared.table, schema, config.name)
        records = slice_body(records, config.head_rows, config.tail_rows)
        extracted = len(records)

        records = [clean_record(record, schema) for record in records]
        records = split_compound_fields(records, schema.code_fields)
        records = [finalize_codes(record, schema) for record in records]
        split = len(records)

        records = deduplicate(filter_markers(records, prepared.markers))

        self.report = ScrapeReport(
            regulation=config.name,
            rows_total=len(table),
            rows_removed=len(prepared.removed),
            markers=sorted(prepared.markers),
            records_extracted=extracted,
            records_split=split,
            records_kept=len(records),
        )
        logger.info(
            "%s: %d rows -> %d extracted -> %d split -> %d kept",
            config.name,
            len(table),
            extracted,
            split,
            len(records),
        )
        return records
