"""Record-level stages: compound code expansion, marker filtering, hazard unification."""

from __future__ import annotations

import logging
import re
from typing import Callable, Hashable, Iterable, TypeVar

from eurlex_food_controls.config import CODE_COLUMNS, FOOD
from eurlex_food_controls.models import FoodRecord, MarkerSet, RawRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_COMPOUND_PARTS = 6
DELIMITER_RE = re.compile(r";|\bor\b|\n")


def split_values(text: str) -> list[str]:
    """
    Split a compound code cell into its non-blank parts.

    An empty cell yields a single empty value so the record survives; a cell
    made only of delimiters yields nothing. Parts beyond the sixth are dropped.
    """
    if not text.strip():
        return [""]
    parts = [part.strip() for part in DELIMITER_RE.split(text) if part.strip()]
    if len(parts) > MAX_COMPOUND_PARTS:
        logger.warning(
            "Compound cell %r has %d values, keeping the first %d",
            text,
            len(parts),
            MAX_COMPOUND_PARTS,
        )
        parts = parts[:MAX_COMPOUND_PARTS]
    return parts


def expand_field(records: Iterable[RawRecord], field: str) -> list[RawRecord]:
    """Emit one record per part of `field`, copying every other field."""
    expanded: list[RawRecord] = []
    for record in records:
        if field not in record:
            expanded.append(record)
            continue
        for part in split_values(record[field]):
            expanded.append({**record, field: part})
    return expanded


def split_compound_fields(
    records: Iterable[RawRecord],
    fields: tuple[str, ...] = CODE_COLUMNS,
) -> list[RawRecord]:
    """Expand each compound field in turn.

    The fields are expanded independently, not positionally: m codes and n
    TARIC sub-divisions give m * n records.
    """
    expanded = list(records)
    for field in fields:
        expanded = expand_field(expanded, field)
    return expanded


def filter_markers(records: Iterable[RawRecord], markers: MarkerSet, key: str = FOOD) -> list[RawRecord]:
    """Drop records whose key field is empty or is a revision-marker text."""
    kept = []
    dropped = 0
    for record in records:
        value = record.get(key, "")
        if not value or value in markers:
            dropped += 1
            continue
        kept.append(record)
    if dropped:
        logger.debug("Dropped %d empty or marker records", dropped)
    return kept


def _record_key(record: RawRecord) -> Hashable:
    return tuple(sorted(record.items()))


def deduplicate(records: Iterable[T], key: Callable[[T], Hashable] = _record_key) -> list[T]:
    """Drop records with the same key, keeping the first occurrence.

    The default key compares raw records on every field.
    """
    seen: set[Hashable] = set()
    unique = []
    for record in records:
        record_key = key(record)
        if record_key in seen:
            continue
        seen.add(record_key)
        unique.append(record)
    return unique


def unify_hazards(
    with_hazard: Iterable[RawRecord],
    without_hazard: Iterable[RawRecord],
    hazard: str,
) -> list[FoodRecord]:
    """Map both record sets to the unified schema, first set first."""
    unified = [FoodRecord.from_record(record) for record in with_hazard]
    unified.extend(FoodRecord.from_record(record, hazard=hazard) for record in without_hazard)
    return unified
