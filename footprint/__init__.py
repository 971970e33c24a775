"""Footprint - CO2 emissions statistics for a single country.

Downloads the Our World in Data CO2 dataset, groups its rows by country,
and reports mean, population standard deviation, and extremes for one
selected country, both on the console and in a text report.

Example:
    >>> from footprint import CarbonMonitor, MonitorConfig
    >>>
    >>> monitor = CarbonMonitor(MonitorConfig())
    >>> dataset = monitor.load()
    >>> analysis = monitor.analyze(dataset, "France")
    >>> print(analysis.statistics.average)
    >>> monitor.save(analysis)
"""

from .aggregator import Statistics, aggregate
from .config import (
    ColumnsConfig,
    ConfigError,
    MonitorConfig,
    ReportConfig,
    SourceConfig,
    apply_overrides,
    load_config,
)
from .errors import (
    CountryNotFound,
    DestinationUnwritable,
    EmptyDatasetError,
    EmptySeriesError,
    FootprintError,
    ReportDestinationUnwritable,
    TransportFailure,
)
from .fetcher import fetch
from .parser import (
    ColumnLayout,
    CountryTable,
    DropReason,
    EmissionRecord,
    ParseResult,
    ParseSummary,
    RowOutcome,
    parse,
)
from .pipeline import Analysis, CarbonMonitor
from .report import render, write_report

__version__ = "0.1.0"

__all__ = [
    "CarbonMonitor",
    "Analysis",
    "MonitorConfig",
    "SourceConfig",
    "ColumnsConfig",
    "ReportConfig",
    "ConfigError",
    "load_config",
    "apply_overrides",
    "fetch",
    "parse",
    "ColumnLayout",
    "CountryTable",
    "DropReason",
    "EmissionRecord",
    "ParseResult",
    "ParseSummary",
    "RowOutcome",
    "aggregate",
    "Statistics",
    "render",
    "write_report",
    "FootprintError",
    "DestinationUnwritable",
    "TransportFailure",
    "EmptyDatasetError",
    "CountryNotFound",
    "ReportDestinationUnwritable",
    "EmptySeriesError",
]
