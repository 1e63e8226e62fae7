"""Text transforms applied to annex table cells.

Every transform is a total ``str -> str`` function: a pattern that matches
nothing leaves the text unchanged.  ``clean_record`` applies them per field in
a fixed order: footnotes, decorative characters, category suffix, edit
indicator, country code, whitespace.
"""

from __future__ import annotations

import re

from eurlex_food_controls.config import COUNTRY, FOOD, ColumnSchema
from eurlex_food_controls.models import RawRecord

FOOTNOTE_RE = re.compile(r"\(\d+\)")
CATEGORY_SUFFIX_RE = re.compile(r"\s*\((?:Food|Feed)\b[^()]*\)\s*$")
EDIT_INDICATOR_RE = re.compile(r"^[^\w(]*[A-Z]\d{1,2}\s+")
COUNTRY_CODE_RE = re.compile(r"\s\([A-Z]{2}\)\s*$")
NON_DIGIT_RE = re.compile(r"\D")
WHITESPACE_RE = re.compile(r"\s+")
KEPT_PUNCTUATION = " (),."


def remove_footnotes(text: str) -> str:
    """Strip footnote references such as ``(3)``."""
    return FOOTNOTE_RE.sub("", text)


def filter_decorative(text: str) -> str:
    """Keep letters, digits, space, parentheses, comma and period."""
    kept = []
    for ch in text:
        if ch.isspace():
            kept.append(" ")
        elif ch.isalnum() or ch in KEPT_PUNCTUATION:
            kept.append(ch)
    return "".join(kept)


def remove_category_suffix(text: str) -> str:
    """Strip a trailing ``(Food ...)`` or ``(Feed ...)`` intended-use note."""
    return CATEGORY_SUFFIX_RE.sub("", text)


def remove_edit_indicator(text: str) -> str:
    """Strip the leading ``M3 `` style amendment indicator left in a cell."""
    return EDIT_INDICATOR_RE.sub("", text, count=1)


def remove_country_code(text: str) -> str:
    return COUNTRY_CODE_RE.sub("", text)


def keep_digits(text: str) -> str:
    return NON_DIGIT_RE.sub("", text)


def normalize_text(text: str) -> str:
    """Normalize whitespace and trim."""
    text = WHITESPACE_RE.sub(" ", text)
    return text.strip()


def clean_value(value: str, field: str, schema: ColumnSchema) -> str:
    value = remove_footnotes(value)
    if field in schema.text_fields:
        value = filter_decorative(value)
    if field == FOOD:
        value = remove_category_suffix(value)
    value = remove_edit_indicator(value)
    if field == COUNTRY:
        value = remove_country_code(value)
    if field in schema.code_fields:
        # Line breaks are split delimiters; finalize_codes trims each part.
        return value
    return normalize_text(value)


def clean_record(record: RawRecord, schema: ColumnSchema) -> RawRecord:
    """Apply the text transforms to every field of one record."""
    return {name: clean_value(value, name, schema) for name, value in record.items()}


def finalize_codes(record: RawRecord, schema: ColumnSchema) -> RawRecord:
    """Reduce split code fields to their digits."""
    finalized = dict(record)
    for name in schema.code_fields:
        if name in finalized:
            finalized[name] = normalize_text(keep_digits(finalized[name]))
    return finalized
