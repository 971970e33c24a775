"""Fixed-layout text rendering of a country's emissions and statistics.

The same text is echoed to the console and written to the report file.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .aggregator import Statistics
from .errors import ReportDestinationUnwritable
from .parser import EmissionRecord

logger = logging.getLogger(__name__)

YEAR_WIDTH = 10
EMISSIONS_WIDTH = 15
DIVIDER_WIDTH = 40


def render(
    country: str,
    records: Sequence[EmissionRecord],
    stats: Statistics,
    precision: int = 2,
) -> str:
    """Render the year table and statistics block.

    Parameters
    ----------
    country : str
        Country name used in the title lines.
    records : Sequence[EmissionRecord]
        Rows of the table, printed in the given order.
    stats : Statistics
        Precomputed statistics for *records*.
    precision : int
        Decimal places for every emissions figure.

    Returns
    -------
    str
        The report text, ending with a newline.
    """

    def num(value: float) -> str:
        return f"{value:.{precision}f}"

    lines = [
        f"CO2 Emissions Report for {country}",
        "-" * DIVIDER_WIDTH,
        f"{'Year':>{YEAR_WIDTH}}{'Emissions (Mt)':>{EMISSIONS_WIDTH}}",
    ]
    for record in records:
        lines.append(f"{record.year:>{YEAR_WIDTH}}{num(record.emissions):>{EMISSIONS_WIDTH}}")

    lines += [
        "",
        f"Statistics for {country}:",
        f"- Average Emissions: {num(stats.average)} Mt",
        f"- Standard Deviation: {num(stats.stddev)} Mt",
        f"- Highest Emissions: {num(stats.max_value)} Mt in {stats.max_year}",
        f"- Lowest Emissions: {num(stats.min_value)} Mt in {stats.min_year}",
    ]
    return "\n".join(lines) + "\n"


def write_report(path: Path, text: str) -> None:
    """Write *text* to *path*, replacing any previous report.

    Raises
    ------
    ReportDestinationUnwritable
        If *path* cannot be opened or written.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise ReportDestinationUnwritable(f"Unable to create report file: {path}") from e
    logger.info("Wrote report %s (%d bytes)", path, len(text))
