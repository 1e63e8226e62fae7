"""CLI entrypoint for building the unified food table."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from eurlex_food_controls.api import ScrapeResult, build_food_table, scrape_file
from eurlex_food_controls.config import REGULATION_669, REGULATION_884, RegulationConfig
from eurlex_food_controls.download.eurlex import download_document, extract_name_from_url
from eurlex_food_controls.errors import ScrapeError
from eurlex_food_controls.export import write_schema, write_table


def _resolve_html(config: RegulationConfig, given: str | None, download_dir: Path, lang: str) -> Path | None:
    if given:
        path = Path(given)
        if not path.exists():
            print(f"Error: Input file not found: {path}", file=sys.stderr)
            return None
        return path

    path = download_dir / f"{extract_name_from_url(config.url)}.html"
    result = download_document(config.url, path, lang=lang)
    if not result.ok:
        print(f"Error: Download of {config.name} failed: {result.status}: {result.error}", file=sys.stderr)
        return None
    return result.output_path


def main() -> None:
    parser = argparse.ArgumentParser(description="Build the unified food table from the 669/2009 and 884/2014 annexes")
    parser.add_argument("--html-669", help="Path to a saved 669/2009 HTML file (default: download)")
    parser.add_argument("--html-884", help="Path to a saved 884/2014 HTML file (default: download)")
    parser.add_argument("--out", "-o", default="out/food_table.csv", help="Output .csv or .json file")
    parser.add_argument("--download-dir", default="downloads/eur-lex", help="Directory for downloaded HTML")
    parser.add_argument("--lang", "-l", default="EN", help="Language code (default: EN)")
    parser.add_argument("--schema", help="Also write the JSON Schema of the JSON output to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log pipeline stages")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    download_dir = Path(args.download_dir)
    results: list[ScrapeResult] = []
    for config, given in ((REGULATION_669, args.html_669), (REGULATION_884, args.html_884)):
        html_path = _resolve_html(config, given, download_dir, args.lang)
        if html_path is None:
            raise SystemExit(1)
        try:
            result = scrape_file(html_path, config)
        except ScrapeError as e:
            print(f"Error: {config.name}: {e}", file=sys.stderr)
            raise SystemExit(1)
        results.append(result)
        print(f"{config.name}: {len(result.records)} records ({result.report.rows_removed} malformed rows removed)")

    records = build_food_table(results[0], results[1])
    output_path = Path(args.out)
    count = write_table(records, output_path, [result.report for result in results])
    print(f"Wrote {count} records -> {output_path}")

    if args.schema:
        write_schema(Path(args.schema))
        print(f"Schema -> {args.schema}")


if __name__ == "__main__":
    main()
