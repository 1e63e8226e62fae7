"""High-level library API for scraping and unifying the annex food tables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from eurlex_food_controls.config import DEFAULT_REGULATIONS, RegulationConfig
from eurlex_food_controls.download.eurlex import DownloadResult, download_document, extract_name_from_url
from eurlex_food_controls.models import FoodRecord, MarkerSet, RawRecord, ScrapeReport
from eurlex_food_controls.pipeline import FoodTableScraper
from eurlex_food_controls.records import deduplicate, unify_hazards
from eurlex_food_controls.table.document import parse_document


@dataclass
class ScrapeResult:
    """Cleaned records scraped from one regulation's annex."""

    config: RegulationConfig
    records: list[RawRecord]
    markers: MarkerSet
    report: ScrapeReport
    source_file: str


@dataclass
class JobResult:
    """Outcome of a single download + scrape job."""

    config: RegulationConfig
    download: DownloadResult
    scrape: ScrapeResult | None
    error: str | None = None


def scrape_html(html_content: str, config: RegulationConfig, source_file: str = "") -> ScrapeResult:
    """Scrape HTML content and return the cleaned records."""
    scraper = FoodTableScraper(config)
    records = scraper.scrape(parse_document(html_content))
    return ScrapeResult(
        config=config,
        records=records,
        markers=scraper.markers,
        report=scraper.report,
        source_file=source_file,
    )


def scrape_file(input_path: str | Path, config: RegulationConfig) -> ScrapeResult:
    """Scrape an HTML file from disk."""
    path = Path(input_path)
    html_content = path.read_text(encoding="utf-8")
    return scrape_html(html_content, config, source_file=str(path))


def build_food_table(with_hazard: ScrapeResult, without_hazard: ScrapeResult) -> list[FoodRecord]:
    """
    Merge two scraped regulations into the unified table.

    `with_hazard` must carry a Hazard column; `without_hazard` gets its
    regulation's constant hazard. Records equal on every field appear once.
    """
    if with_hazard.config.hazard is not None:
        raise ValueError(f"{with_hazard.config.name} has no Hazard column")
    hazard = without_hazard.config.hazard
    if hazard is None:
        raise ValueError(f"{without_hazard.config.name} has no constant hazard")

    unified = unify_hazards(with_hazard.records, without_hazard.records, hazard)
    return deduplicate(unified, key=lambda record: tuple(record.as_row().values()))


def download_and_scrape(
    download_dir: str | Path,
    configs: Iterable[RegulationConfig] = DEFAULT_REGULATIONS,
    lang: str = "EN",
) -> list[JobResult]:
    """Run download and scrape for every configured regulation."""
    jobs = []
    for config in configs:
        output_path = Path(download_dir) / f"{extract_name_from_url(config.url)}.html"
        download_result = download_document(config.url, output_path, lang=lang)
        if not download_result.ok:
            jobs.append(JobResult(config=config, download=download_result, scrape=None))
            continue

        # ScrapeError and UnicodeDecodeError are both ValueError.
        try:
            scrape_result = scrape_file(download_result.output_path, config)
        except (OSError, ValueError) as e:
            jobs.append(JobResult(config=config, download=download_result, scrape=None, error=str(e)))
            continue
        jobs.append(JobResult(config=config, download=download_result, scrape=scrape_result))
    return jobs
