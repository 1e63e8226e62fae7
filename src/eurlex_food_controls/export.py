"""Write the unified food table to CSV or JSON."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

from eurlex_food_controls.config import UNIFIED_COLUMNS
from eurlex_food_controls.models import FoodRecord, ScrapeReport
from eurlex_food_controls.schema import build_output_schema


def write_csv(records: Iterable[FoodRecord], csv_path: Path) -> int:
    count = 0
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, "w", newline="", encoding="utf-8") as csv_file:
        writer = csv.DictWriter(csv_file, fieldnames=list(UNIFIED_COLUMNS))
        writer.writeheader()
        for record in records:
            writer.writerow(record.as_row())
            count += 1
    return count


def write_json(
    records: Iterable[FoodRecord],
    json_path: Path,
    reports: Iterable[ScrapeReport] = (),
) -> int:
    payload = {
        "records": [asdict(record) for record in records],
        "reports": [asdict(report) for report in reports],
    }
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return len(payload["records"])


def write_schema(schema_path: Path) -> None:
    schema_path.parent.mkdir(parents=True, exist_ok=True)
    schema_path.write_text(
        json.dumps(build_output_schema(), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )


def write_table(
    records: list[FoodRecord],
    output_path: Path,
    reports: Iterable[ScrapeReport] = (),
) -> int:
    """Write CSV or JSON depending on the file suffix."""
    if output_path.suffix.lower() == ".json":
        return write_json(records, output_path, reports)
    return write_csv(records, output_path)
