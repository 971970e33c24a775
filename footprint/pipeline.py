"""Orchestration of the fetch → parse → aggregate → render pipeline.

:class:`CarbonMonitor` holds the resolved configuration and exposes the
stages separately so the CLI can interleave console I/O between them::

    monitor = CarbonMonitor(config)
    dataset = monitor.load()                      # fetch + parse
    analysis = monitor.analyze(dataset, "France") # aggregate + render
    monitor.save(analysis)                        # write report file
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .aggregator import Statistics, aggregate
from .config import ColumnsConfig, MonitorConfig
from .errors import CountryNotFound, EmptyDatasetError
from .fetcher import fetch
from .parser import ColumnLayout, EmissionRecord, ParseResult, parse
from .report import render, write_report

logger = logging.getLogger(__name__)

FetchFn = Callable[[str, Path, float | None], int]


@dataclass
class Analysis:
    """Statistics and rendered text for one selected country."""

    country: str
    records: list[EmissionRecord]
    statistics: Statistics
    text: str


def layout_from_config(columns: ColumnsConfig) -> ColumnLayout:
    """Build the parser's :class:`ColumnLayout` from column settings."""
    return ColumnLayout(
        country=columns.country,
        year=columns.year,
        emissions=columns.emissions,
        country_index=columns.country_index,
        year_index=columns.year_index,
        emissions_index=columns.emissions_index,
        match_header=columns.match_header,
    )


def normalize_selection(text: str) -> str:
    """Strip surrounding whitespace from a typed country name.

    Matching stays exact and case-sensitive after this.
    """
    return text.strip()


class CarbonMonitor:
    """Run the emissions pipeline for a single country selection.

    Parameters
    ----------
    config : MonitorConfig
        Resolved configuration, threaded through every stage.
    fetch_fn : FetchFn | None
        Download function; defaults to :func:`footprint.fetcher.fetch`.
    """

    def __init__(self, config: MonitorConfig, fetch_fn: FetchFn | None = None) -> None:
        self.config = config
        self._fetch = fetch_fn or fetch
        self._layout = layout_from_config(config.columns)

    def load(self) -> ParseResult:
        """Download and parse the dataset.

        Raises
        ------
        DestinationUnwritable, TransportFailure
            From the fetch stage.
        OSError
            If the downloaded file cannot be read back.
        EmptyDatasetError
            If no row was accepted.
        """
        source = self.config.source
        self._fetch(source.url, source.dataset_file, source.timeout)
        result = parse(source.dataset_file, self._layout)
        if not result.table:
            raise EmptyDatasetError(
                f"No data available after parsing {source.dataset_file} "
                f"({result.summary.dropped} rows dropped)"
            )
        return result

    def analyze(self, dataset: ParseResult, country: str) -> Analysis:
        """Compute statistics and render the report text for *country*.

        Nothing is written to disk here.

        Raises
        ------
        CountryNotFound
            If the normalised name is not a key of the table.
        """
        name = normalize_selection(country)
        records = dataset.table.get(name)
        if records is None:
            raise CountryNotFound(name)

        stats = aggregate(records)
        logger.debug("Statistics for %s: %s", name, stats)
        text = render(name, records, stats, precision=self.config.report.precision)
        return Analysis(country=name, records=records, statistics=stats, text=text)

    def save(self, analysis: Analysis) -> Path:
        """Write the rendered report, overwriting any previous one.

        Raises
        ------
        ReportDestinationUnwritable
            If the report file cannot be written.
        """
        path = self.config.report.file
        write_report(path, analysis.text)
        return path
