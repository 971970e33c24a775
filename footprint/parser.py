"""CSV parsing into a per-country table of emission records.

The dataset is read line by line and split naively on commas: quoted
fields are not understood, so a value containing a comma shifts the
columns of that row. Rows that are too short, have an empty country,
year, or value, or whose value is not a float are dropped. Dropped rows
never raise; they are only counted in the :class:`ParseSummary`.

Column positions come from a :class:`ColumnLayout`. By default the header
row is searched for the named columns; when any name is missing the fixed
offsets are used instead and a warning is logged.
"""

from __future__ import annotations

import enum
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DELIMITER = ","


@dataclass(frozen=True)
class EmissionRecord:
    """One country-year CO2 measurement, in megatonnes."""

    year: str
    emissions: float


CountryTable = dict[str, list[EmissionRecord]]


class DropReason(enum.Enum):
    """Why a data row was excluded from the table."""

    SHORT_ROW = "short_row"
    MISSING_FIELD = "missing_field"
    NOT_NUMERIC = "not_numeric"


@dataclass(frozen=True)
class RowOutcome:
    """Result of parsing one data row.

    Exactly one of ``record`` and ``reason`` is set.
    """

    country: str
    record: EmissionRecord | None = None
    reason: DropReason | None = None

    @property
    def accepted(self) -> bool:
        return self.record is not None


@dataclass
class ParseSummary:
    """Counts of accepted and dropped data rows."""

    accepted: int = 0
    dropped: int = 0
    dropped_by_reason: Counter[DropReason] = field(default_factory=Counter)

    def add(self, outcome: RowOutcome) -> None:
        if outcome.accepted:
            self.accepted += 1
        else:
            self.dropped += 1
            self.dropped_by_reason[outcome.reason] += 1


@dataclass
class ParseResult:
    """The parsed table together with its summary."""

    table: CountryTable
    summary: ParseSummary

    @property
    def countries(self) -> list[str]:
        """Country keys in sorted order."""
        return sorted(self.table)


# =====================================================================
# Column layout
# =====================================================================


@dataclass(frozen=True)
class ColumnLayout:
    """Named positions of the country, year, and emissions columns.

    The default offsets (0, 2, 6) match the legacy OWID layout
    ``country,iso_code,year,...,co2``.
    """

    country: str = "country"
    year: str = "year"
    emissions: str = "co2"
    country_index: int = 0
    year_index: int = 2
    emissions_index: int = 6
    match_header: bool = True

    @property
    def indices(self) -> tuple[int, int, int]:
        return (self.country_index, self.year_index, self.emissions_index)

    def resolve(self, header: list[str]) -> tuple[int, int, int]:
        """Return ``(country, year, emissions)`` indices for this header.

        Parameters
        ----------
        header : list[str]
            Header row split on the delimiter.

        Returns
        -------
        tuple[int, int, int]
            Column indices to read from each data row.
        """
        if not self.match_header:
            return self.indices

        positions = {name.strip(): i for i, name in reversed(list(enumerate(header)))}
        names = (self.country, self.year, self.emissions)
        missing = [name for name in names if name not in positions]
        if missing:
            logger.warning(
                "Header is missing column(s) %s; falling back to fixed offsets %s",
                missing,
                self.indices,
            )
            return self.indices

        resolved = tuple(positions[name] for name in names)
        if resolved != self.indices:
            logger.debug("Resolved columns %s at %s", names, resolved)
        return resolved  # type: ignore[return-value]


# =====================================================================
# Parsing
# =====================================================================


def parse_row(line: str, indices: tuple[int, int, int]) -> RowOutcome:
    """Parse one data line into a :class:`RowOutcome`.

    Parameters
    ----------
    line : str
        A data line without its trailing newline.
    indices : tuple[int, int, int]
        Country, year, and emissions column indices.

    Returns
    -------
    RowOutcome
        The accepted record, or the reason the row was dropped.
    """
    fields = line.split(DELIMITER)
    country_idx, year_idx, value_idx = indices

    country = fields[country_idx] if country_idx < len(fields) else ""
    if max(indices) >= len(fields):
        return RowOutcome(country=country, reason=DropReason.SHORT_ROW)

    year = fields[year_idx]
    raw_value = fields[value_idx]
    if not country or not year or not raw_value:
        return RowOutcome(country=country, reason=DropReason.MISSING_FIELD)

    if "_" in raw_value:
        # float() would also accept Python digit separators such as 1_000.
        return RowOutcome(country=country, reason=DropReason.NOT_NUMERIC)
    try:
        value = float(raw_value)
    except ValueError:
        return RowOutcome(country=country, reason=DropReason.NOT_NUMERIC)

    return RowOutcome(country=country, record=EmissionRecord(year=year, emissions=value))


def parse(path: Path, layout: ColumnLayout | None = None) -> ParseResult:
    """Read a local CSV file into a :class:`ParseResult`.

    Records are appended to each country's list in file order; nothing is
    re-sorted.

    Parameters
    ----------
    path : Path
        Local dataset file.
    layout : ColumnLayout | None
        Column selection; defaults to ``ColumnLayout()``.

    Returns
    -------
    ParseResult
        Fully materialised table and parse summary.

    Raises
    ------
    OSError
        If the file cannot be opened.
    """
    layout = layout or ColumnLayout()
    table: CountryTable = {}
    summary = ParseSummary()

    with open(path, encoding="utf-8-sig", errors="replace") as f:
        header = f.readline()
        if not header:
            logger.warning("Dataset %s is empty", path)
            return ParseResult(table=table, summary=summary)
        indices = layout.resolve(header.rstrip("\r\n").split(DELIMITER))

        for line in f:
            outcome = parse_row(line.rstrip("\r\n"), indices)
            summary.add(outcome)
            if outcome.record is not None:
                table.setdefault(outcome.country, []).append(outcome.record)

    logger.info(
        "Parsed %s: %d rows accepted, %d dropped, %d countries",
        path,
        summary.accepted,
        summary.dropped,
        len(table),
    )
    for reason, count in summary.dropped_by_reason.items():
        logger.debug("  dropped %d row(s): %s", count, reason.value)
    return ParseResult(table=table, summary=summary)
