"""Shared fixtures for the footprint test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from footprint.config import ColumnsConfig, MonitorConfig, ReportConfig, SourceConfig
from footprint.parser import EmissionRecord

# ---------------------------------------------------------------------------
# Sample CSV content
# ---------------------------------------------------------------------------

HEADER = "country,iso_code,year,population,gdp,cement_co2,co2"

SAMPLE_CSV = f"""\
{HEADER}
Albania,ALB,2000,3100000,,0.1,3.02
Albania,ALB,2001,3090000,,0.1,3.23
Albania,ALB,2002,3080000,,0.2,3.75
France,FRA,2000,60900000,,4.1,408.5
France,FRA,2001,61300000,,4.2,
France,FRA,2002,61700000,,4.0,n/a
Brazil,BRA,2000,175000000,,9.3,329.6
,XXX,2000,1,,0.0,1.0
Chile,CHL,,15000000,,1.0,55.0
France,FRA,2003,62100000,,4.3,410.2
Truncated,TRU,2000
"""

# A newer OWID-style header where the wanted columns sit elsewhere.
REORDERED_CSV = """\
country,year,iso_code,population,gdp,cement_co2,co2_growth_abs,co2
Albania,2000,ALB,3100000,,0.1,0.5,3.02
Albania,2001,ALB,3090000,,0.1,0.2,3.23
"""


def make_records(values: list[float], start_year: int = 2000) -> list[EmissionRecord]:
    """Records with consecutive year labels starting at *start_year*."""
    return [EmissionRecord(year=str(start_year + i), emissions=v) for i, v in enumerate(values)]


# ---------------------------------------------------------------------------
# Temp file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_csv(tmp_path: Path) -> Path:
    """Temporary CSV file containing SAMPLE_CSV."""
    p = tmp_path / "co2.csv"
    p.write_text(SAMPLE_CSV, encoding="utf-8")
    return p


@pytest.fixture()
def header_only_csv(tmp_path: Path) -> Path:
    """CSV with a header row and no data."""
    p = tmp_path / "empty.csv"
    p.write_text(HEADER + "\n", encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# Config / fetch fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def monitor_config(tmp_path: Path) -> MonitorConfig:
    """Config whose dataset and report files live in tmp_path."""
    return MonitorConfig(
        source=SourceConfig(url="https://example.test/co2.csv", dataset_file=tmp_path / "co2.csv"),
        columns=ColumnsConfig(),
        report=ReportConfig(file=tmp_path / "report.txt"),
    )


def make_fake_fetch(content: str, calls: list[tuple] | None = None):
    """Fetch function that writes *content* to the destination."""

    def _fetch(url: str, destination: Path, timeout: float | None) -> int:
        if calls is not None:
            calls.append((url, destination, timeout))
        data = content.encode("utf-8")
        Path(destination).write_bytes(data)
        return len(data)

    return _fetch


@pytest.fixture()
def fake_fetch():
    """Fetch function writing SAMPLE_CSV."""
    return make_fake_fetch(SAMPLE_CSV)
