"""Per-regulation scrape configuration."""

from __future__ import annotations

from dataclasses import dataclass

FOOD = "Food"
CODE = "Code"
TARIC = "TARIC"
COUNTRY = "Country"
HAZARD = "Hazard"
FREQUENCY = "Frequency"

UNIFIED_COLUMNS = (FOOD, CODE, TARIC, COUNTRY, HAZARD)
CODE_COLUMNS = (CODE, TARIC)

DEFAULT_MARKER_CLASSES = ("modref", "arrow")
AFLATOXINS = "Aflatoxins"


@dataclass(frozen=True)
class ColumnSchema:
    """Ordered column names bound positionally to the annex table columns."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"Duplicate column names in schema: {self.names}")
        missing = [name for name in (FOOD, CODE, TARIC, COUNTRY) if name not in self.names]
        if missing:
            raise ValueError(f"Schema is missing required columns: {', '.join(missing)}")

    def __len__(self) -> int:
        return len(self.names)

    @property
    def has_hazard(self) -> bool:
        return HAZARD in self.names

    @property
    def code_fields(self) -> tuple[str, ...]:
        return CODE_COLUMNS

    @property
    def text_fields(self) -> tuple[str, ...]:
        """Columns that go through decorative-character filtering."""
        return tuple(name for name in (FOOD, COUNTRY, HAZARD) if name in self.names)


@dataclass(frozen=True)
class RegulationConfig:
    """Everything needed to scrape one regulation's annex table."""

    name: str
    celex: str
    url: str
    locator: str
    schema: ColumnSchema
    hazard: str | None = None
    head_rows: int = 1
    tail_rows: int = 0
    marker_classes: tuple[str, ...] = DEFAULT_MARKER_CLASSES

    def __post_init__(self) -> None:
        if self.schema.has_hazard and self.hazard is not None:
            raise ValueError(f"{self.name}: schema has a Hazard column, constant hazard must be None")
        if not self.schema.has_hazard and not self.hazard:
            raise ValueError(f"{self.name}: schema has no Hazard column, a constant hazard is required")
        if self.head_rows < 0 or self.tail_rows < 0:
            raise ValueError(f"{self.name}: head_rows and tail_rows must be >= 0")


REGULATION_669 = RegulationConfig(
    name="669/2009",
    celex="02009R0669-20190509",
    url="https://eur-lex.europa.eu/legal-content/EN/TXT/?uri=CELEX:02009R0669-20190509",
    locator="table",
    schema=ColumnSchema((FOOD, CODE, TARIC, COUNTRY, HAZARD, FREQUENCY)),
)

REGULATION_884 = RegulationConfig(
    name="884/2014",
    celex="02014R0884-20190314",
    url="https://eur-lex.europa.eu/legal-content/EN/TXT/?uri=CELEX:02014R0884-20190314",
    locator="table",
    schema=ColumnSchema((FOOD, CODE, TARIC, COUNTRY, FREQUENCY)),
    hazard=AFLATOXINS,
)

DEFAULT_REGULATIONS = (REGULATION_669, REGULATION_884)
