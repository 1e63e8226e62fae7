"""Structural errors raised while scraping an annex table."""

from __future__ import annotations


class ScrapeError(ValueError):
    """Base class for failures that abort the scrape of one document."""


class LocatorMissError(ScrapeError):
    """The configured selector did not match a table in the document."""

    def __init__(self, locator: str, regulation: str | None = None):
        self.locator = locator
        self.regulation = regulation
        where = f" in {regulation}" if regulation else ""
        super().__init__(f"No table matches locator {locator!r}{where}")


class SchemaMismatchError(ScrapeError):
    """A table row does not have one cell per configured column."""

    def __init__(self, row_index: int, expected: int, actual: int, regulation: str | None = None):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        self.regulation = regulation
        where = f" in {regulation}" if regulation else ""
        super().__init__(
            f"Row {row_index}{where} has {actual} cells, schema defines {expected} columns"
        )
