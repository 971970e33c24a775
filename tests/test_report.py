"""Unit tests for footprint.report module."""

from __future__ import annotations

from pathlib import Path

import pytest

from footprint.aggregator import aggregate
from footprint.errors import ReportDestinationUnwritable
from footprint.parser import EmissionRecord
from footprint.report import render, write_report

from .conftest import make_records

EXPECTED = """\
CO2 Emissions Report for Chad
----------------------------------------
      Year Emissions (Mt)
      2000          10.00
      2001          20.00
      2002          30.00

Statistics for Chad:
- Average Emissions: 20.00 Mt
- Standard Deviation: 8.16 Mt
- Highest Emissions: 30.00 Mt in 2002
- Lowest Emissions: 10.00 Mt in 2000
"""


class TestRender:
    def test_full_layout(self) -> None:
        records = make_records([10.0, 20.0, 30.0])
        assert render("Chad", records, aggregate(records)) == EXPECTED

    def test_fixed_widths(self) -> None:
        records = [EmissionRecord("1999", 42.0)]
        lines = render("X", records, aggregate(records)).splitlines()
        assert len(lines[2]) == 25
        assert lines[3] == f"{'1999':>10}{'42.00':>15}"

    def test_precision(self) -> None:
        records = [EmissionRecord("1999", 1.23456)]
        text = render("X", records, aggregate(records), precision=3)
        assert "         1.235" in text
        assert "- Average Emissions: 1.235 Mt" in text

    def test_rows_in_given_order(self) -> None:
        records = [EmissionRecord("2003", 1.0), EmissionRecord("2000", 2.0)]
        lines = render("X", records, aggregate(records)).splitlines()
        assert lines[3].strip().startswith("2003")
        assert lines[4].strip().startswith("2000")


class TestWriteReport:
    def test_writes_text(self, tmp_path: Path) -> None:
        path = tmp_path / "report.txt"
        write_report(path, "hello\n")
        assert path.read_text(encoding="utf-8") == "hello\n"

    def test_overwrites_previous(self, tmp_path: Path) -> None:
        path = tmp_path / "report.txt"
        write_report(path, "first run\n")
        write_report(path, "second\n")
        assert path.read_text(encoding="utf-8") == "second\n"

    def test_unwritable_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "missing-dir" / "report.txt"
        with pytest.raises(ReportDestinationUnwritable, match="Unable to create report file"):
            write_report(path, "x")
