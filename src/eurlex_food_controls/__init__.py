"""Public package API for eurlex-food-controls."""

from eurlex_food_controls.api import (
    JobResult,
    ScrapeResult,
    build_food_table,
    download_and_scrape,
    scrape_file,
    scrape_html,
)
from eurlex_food_controls.config import (
    DEFAULT_REGULATIONS,
    REGULATION_669,
    REGULATION_884,
    ColumnSchema,
    RegulationConfig,
)
from eurlex_food_controls.download.eurlex import DownloadResult, download_document, download_eurlex
from eurlex_food_controls.errors import LocatorMissError, SchemaMismatchError, ScrapeError
from eurlex_food_controls.models import FoodRecord, ScrapeReport, Table, TableCell
from eurlex_food_controls.pipeline import FoodTableScraper

__all__ = [
    "FoodTableScraper",
    "scrape_html",
    "scrape_file",
    "build_food_table",
    "download_and_scrape",
    "ScrapeResult",
    "JobResult",
    "ColumnSchema",
    "RegulationConfig",
    "REGULATION_669",
    "REGULATION_884",
    "DEFAULT_REGULATIONS",
    "DownloadResult",
    "download_document",
    "download_eurlex",
    "ScrapeError",
    "LocatorMissError",
    "SchemaMismatchError",
    "FoodRecord",
    "ScrapeReport",
    "Table",
    "TableCell",
]
