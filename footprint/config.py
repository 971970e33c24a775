"""YAML-based configuration for the emissions pipeline.

Loads an optional ``--config footprint.yaml`` file and resolves the source,
column, and report settings using the merge priority::

    CLI flags  >  config file  >  hardcoded defaults

This module imports only stdlib + ``yaml``, no other ``footprint.*``
imports. It is consumed by ``footprint/cli.py``, which hands the resolved
:class:`MonitorConfig` to :class:`footprint.pipeline.CarbonMonitor`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_DATASET_URL = (
    "https://raw.githubusercontent.com/owid/co2-data/refs/heads/master/owid-co2-data.csv"
)
DEFAULT_DATASET_FILE = "owid-co2-data.csv"
DEFAULT_REPORT_FILE = "report.txt"
DEFAULT_PRECISION = 2


class ConfigError(ValueError):
    """Raised on configuration validation failures."""


# =====================================================================
# Dataclasses
# =====================================================================

_VALID_SECTIONS = frozenset({"source", "columns", "report"})


@dataclass
class SourceConfig:
    """Where the dataset comes from and where it is stored locally.

    ``timeout`` is ``None`` by default: the download blocks until the
    server answers or the connection drops.
    """

    url: str = DEFAULT_DATASET_URL
    dataset_file: Path = field(default_factory=lambda: Path(DEFAULT_DATASET_FILE))
    timeout: float | None = None


@dataclass
class ColumnsConfig:
    """Which CSV columns hold the country, year, and emissions value."""

    match_header: bool = True
    country: str = "country"
    year: str = "year"
    emissions: str = "co2"
    country_index: int = 0
    year_index: int = 2
    emissions_index: int = 6


@dataclass
class ReportConfig:
    """Report destination and numeric display precision."""

    file: Path = field(default_factory=lambda: Path(DEFAULT_REPORT_FILE))
    precision: int = DEFAULT_PRECISION


@dataclass
class MonitorConfig:
    """Top-level configuration, built once at startup."""

    source: SourceConfig = field(default_factory=SourceConfig)
    columns: ColumnsConfig = field(default_factory=ColumnsConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


# =====================================================================
# Loading & Validation
# =====================================================================


def load_config(path: Path) -> MonitorConfig:
    """Parse a YAML config file and return a ``MonitorConfig``.

    Relative ``dataset_file`` and report ``file`` paths are kept relative
    to the working directory, not the config file.

    Parameters
    ----------
    path : Path
        Path to the YAML configuration file.

    Returns
    -------
    MonitorConfig
        Parsed and validated configuration.

    Raises
    ------
    ConfigError
        If the file is not valid YAML or fails validation.
    FileNotFoundError
        If the config file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw_text = path.read_text(encoding="utf-8")
    try:
        raw = yaml.safe_load(raw_text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        # Empty YAML file: return default config
        return MonitorConfig()

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    config = _parse_raw(raw)
    validate_config(config)
    return config


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level section as a dict, or an empty one if absent."""
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{name}' must be a mapping")
    return value


def _path(value: Any, name: str) -> Path:
    """Convert a YAML scalar to a ``Path``."""
    if isinstance(value, Path):
        return value
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{name} must be a non-empty path string, got {value!r}")
    return Path(value)


def _parse_raw(raw: dict[str, Any]) -> MonitorConfig:
    """Build a ``MonitorConfig`` from a raw YAML dict."""
    unknown = set(raw) - _VALID_SECTIONS
    if unknown:
        raise ConfigError(
            f"Unknown section(s) {sorted(unknown)}. Valid sections: {sorted(_VALID_SECTIONS)}"
        )

    defaults = MonitorConfig()

    s = _section(raw, "source")
    source = SourceConfig(
        url=s.get("url", defaults.source.url),
        dataset_file=_path(
            s.get("dataset_file", defaults.source.dataset_file), "source.dataset_file"
        ),
        timeout=s.get("timeout", defaults.source.timeout),
    )

    c = _section(raw, "columns")
    d = defaults.columns
    columns = ColumnsConfig(
        match_header=c.get("match_header", d.match_header),
        country=c.get("country", d.country),
        year=c.get("year", d.year),
        emissions=c.get("emissions", d.emissions),
        country_index=c.get("country_index", d.country_index),
        year_index=c.get("year_index", d.year_index),
        emissions_index=c.get("emissions_index", d.emissions_index),
    )

    r = _section(raw, "report")
    report = ReportConfig(
        file=_path(r.get("file", defaults.report.file), "report.file"),
        precision=r.get("precision", defaults.report.precision),
    )

    return MonitorConfig(source=source, columns=columns, report=report)


def validate_config(config: MonitorConfig) -> None:
    """Validate a config, raising ``ConfigError`` on problems."""
    if not isinstance(config.source.url, str) or not config.source.url:
        raise ConfigError("source.url must be a non-empty string")

    timeout = config.source.timeout
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0:
            raise ConfigError(f"source.timeout must be a positive number, got {timeout!r}")

    cols = config.columns
    if not isinstance(cols.match_header, bool):
        raise ConfigError("columns.match_header must be true or false")

    for name in ("country", "year", "emissions"):
        value = getattr(cols, name)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"columns.{name} must be a non-empty string")

    indices = {
        "country_index": cols.country_index,
        "year_index": cols.year_index,
        "emissions_index": cols.emissions_index,
    }
    for name, value in indices.items():
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"columns.{name} must be a non-negative integer, got {value!r}")
    if len(set(indices.values())) != len(indices):
        raise ConfigError(f"Column indices must be distinct, got {indices}")

    precision = config.report.precision
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConfigError(f"report.precision must be a non-negative integer, got {precision!r}")


# =====================================================================
# Resolution
# =====================================================================


def apply_overrides(
    config: MonitorConfig,
    *,
    url: str | None = None,
    dataset_file: Path | None = None,
    report_file: Path | None = None,
    timeout: float | None = None,
    precision: int | None = None,
) -> MonitorConfig:
    """Return a copy of *config* with non-None CLI values applied on top.

    Raises
    ------
    ConfigError
        If the merged configuration is invalid.
    """
    source = config.source
    report = config.report
    if url is not None:
        source = replace(source, url=url)
    if dataset_file is not None:
        source = replace(source, dataset_file=dataset_file)
    if timeout is not None:
        source = replace(source, timeout=timeout)
    if report_file is not None:
        report = replace(report, file=report_file)
    if precision is not None:
        report = replace(report, precision=precision)

    merged = MonitorConfig(source=source, columns=replace(config.columns), report=report)
    validate_config(merged)
    return merged
