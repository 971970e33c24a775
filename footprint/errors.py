"""Exception hierarchy for the footprint pipeline.

Library code raises these; only :mod:`footprint.cli` turns them into
console messages and exit codes.
"""

from __future__ import annotations


class FootprintError(Exception):
    """Base class for all pipeline failures."""


class DestinationUnwritable(FootprintError):
    """The local dataset file could not be opened for writing."""


class TransportFailure(FootprintError):
    """The dataset request failed (connection, DNS, TLS, or HTTP status)."""


class EmptyDatasetError(FootprintError):
    """Parsing produced no accepted records at all."""


class CountryNotFound(FootprintError):
    """The selected country is not a key of the parsed table."""

    def __init__(self, country: str) -> None:
        super().__init__(f"Country not found in dataset: {country!r}")
        self.country = country


class ReportDestinationUnwritable(FootprintError):
    """The report file could not be opened for writing."""


class EmptySeriesError(FootprintError, ValueError):
    """Statistics were requested for an empty record sequence."""
