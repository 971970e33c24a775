"""Descriptive statistics over one country's emission records."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import EmptySeriesError
from .parser import EmissionRecord


@dataclass(frozen=True)
class Statistics:
    """Summary of a single country's series.

    ``stddev`` is the *population* standard deviation (divisor ``count``,
    not ``count - 1``).
    """

    count: int
    total: float
    average: float
    stddev: float
    max_value: float
    max_year: str
    min_value: float
    min_year: str


def aggregate(records: Sequence[EmissionRecord]) -> Statistics:
    """Compute :class:`Statistics` for a non-empty record sequence.

    Extremes are found with a strict comparison while scanning in order, so
    on ties the earliest record keeps its year. NaN and infinite values are
    not filtered and propagate through the arithmetic.

    Parameters
    ----------
    records : Sequence[EmissionRecord]
        One country's records in file order.

    Returns
    -------
    Statistics
        Fresh statistics for *records*.

    Raises
    ------
    EmptySeriesError
        If *records* is empty.
    """
    if not records:
        raise EmptySeriesError("Cannot compute statistics for an empty record sequence")

    count = len(records)
    first = records[0]
    total = 0.0
    max_value, max_year = first.emissions, first.year
    min_value, min_year = first.emissions, first.year

    for record in records:
        total += record.emissions
        if record.emissions > max_value:
            max_value, max_year = record.emissions, record.year
        if record.emissions < min_value:
            min_value, min_year = record.emissions, record.year

    average = total / count
    variance = sum((r.emissions - average) ** 2 for r in records) / count

    return Statistics(
        count=count,
        total=total,
        average=average,
        stddev=math.sqrt(variance),
        max_value=max_value,
        max_year=max_year,
        min_value=min_value,
        min_year=min_year,
    )
