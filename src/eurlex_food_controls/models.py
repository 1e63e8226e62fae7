"""Core data models for annex tables and the unified food table."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field
from typing import Any

from eurlex_food_controls.config import CODE, COUNTRY, FOOD, HAZARD, TARIC

RawRecord = dict[str, str]
MarkerSet = frozenset[str]


def schema_field(
    description: str,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    json_schema: dict[str, Any] | None = None,
) -> Any:
    """Create a dataclass field with reusable JSON Schema metadata."""

    metadata: dict[str, Any] = {"description": description}
    if json_schema is not None:
        metadata["json_schema"] = json_schema

    kwargs: dict[str, Any] = {"metadata": metadata}
    if default is not MISSING:
        kwargs["default"] = default
    if default_factory is not MISSING:
        kwargs["default_factory"] = default_factory
    return field(**kwargs)


@dataclass(frozen=True)
class TableCell:
    """One `<td>`/`<th>` of an annex table, detached from the document tree."""

    text: str
    colspan: str | None = None
    rowspan: str | None = None
    is_marker: bool = False


TableRow = tuple[TableCell, ...]


@dataclass(frozen=True)
class Table:
    """Immutable row/cell snapshot of an annex table."""

    rows: tuple[TableRow, ...] = ()

    def __len__(self) -> int:
        return len(self.rows)


@dataclass
class FoodRecord:
    """One row of the unified food table."""

    food: str = schema_field("Feed or food description, cleaned of footnotes and markers.")
    code: str = schema_field(
        "CN code, digits only; empty when the annex cell was empty.",
        json_schema={"pattern": "^[0-9]*$"},
    )
    taric: str = schema_field(
        "TARIC sub-division, digits only; empty when not subdivided.",
        json_schema={"pattern": "^[0-9]*$"},
    )
    country: str = schema_field("Country of origin without the ISO code suffix.")
    hazard: str = schema_field("Hazard listed for the item, or the regulation-wide hazard.")

    def as_row(self) -> dict[str, str]:
        return {
            FOOD: self.food,
            CODE: self.code,
            TARIC: self.taric,
            COUNTRY: self.country,
            HAZARD: self.hazard,
        }

    @classmethod
    def from_record(cls, record: RawRecord, hazard: str | None = None) -> "FoodRecord":
        return cls(
            food=record.get(FOOD, ""),
            code=record.get(CODE, ""),
            taric=record.get(TARIC, ""),
            country=record.get(COUNTRY, ""),
            hazard=hazard if hazard is not None else record.get(HAZARD, ""),
        )


@dataclass
class ScrapeReport:
    """Row and record counts collected while scraping one regulation."""

    regulation: str = schema_field("Regulation number, e.g. `669/2009`.")
    rows_total: int = schema_field(default=0, description="Rows in the located table before sanitization.")
    rows_removed: int = schema_field(default=0, description="Malformed rows removed by the sanitizer.")
    markers: list[str] = schema_field(
        default_factory=list,
        description="Revision marker texts captured before sanitization.",
    )
    records_extracted: int = schema_field(
        default=0,
        description="Records left after dropping the configured header and footer rows.",
    )
    records_split: int = schema_field(default=0, description="Records after compound code expansion.")
    records_kept: int = schema_field(
        default=0,
        description="Records left after marker filtering and deduplication.",
    )
