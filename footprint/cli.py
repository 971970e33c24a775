"""CLI entry point for the Carbon Footprint Monitoring Tool.

Downloads the OWID CO2 dataset, lists the available countries, asks for
one country, and prints its emissions table and statistics. The same text
is saved to the report file.

Usage:
    footprint
    footprint --country France
    footprint --config footprint.yaml --report-file france.txt --country France
    footprint --url https://example.org/co2.csv --timeout 30 --verbose
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import click

from .config import ConfigError, MonitorConfig, apply_overrides, load_config
from .errors import (
    CountryNotFound,
    DestinationUnwritable,
    EmptyDatasetError,
    ReportDestinationUnwritable,
    TransportFailure,
)
from .parser import ParseResult
from .pipeline import CarbonMonitor

TOOL_NAME = "Carbon Footprint Monitoring Tool"
PROMPT = "Enter the name of the country you want to analyze"


def _error(message: str) -> None:
    click.echo(click.style(f"Error: {message}", bold=True, fg="red"), err=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="footprint",
        description="Download the OWID CO2 dataset and report statistics for one country",
    )
    parser.add_argument(
        "--country",
        default=None,
        help="Country to analyze (skips the interactive prompt)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Dataset URL (default: OWID co2-data on GitHub)",
    )
    parser.add_argument(
        "--dataset-file",
        type=Path,
        default=None,
        help="Where to store the downloaded CSV (default: owid-co2-data.csv)",
    )
    parser.add_argument(
        "--report-file",
        type=Path,
        default=None,
        help="Where to write the report (default: report.txt)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Download timeout in seconds (default: none)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places for emissions figures (default: 2)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> MonitorConfig:
    """Load the optional config file and apply CLI overrides.

    Raises
    ------
    ConfigError, FileNotFoundError
        On a missing or invalid config file, or invalid override values.
    """
    config = load_config(args.config) if args.config else MonitorConfig()
    return apply_overrides(
        config,
        url=args.url,
        dataset_file=args.dataset_file,
        report_file=args.report_file,
        timeout=args.timeout,
        precision=args.precision,
    )


def _display_countries(dataset: ParseResult) -> None:
    click.echo("\nAvailable Countries:")
    for country in dataset.countries:
        click.echo(f"- {country}")
    click.echo("")


def _select_country(args: argparse.Namespace, dataset: ParseResult) -> str:
    """Return the single country selection, prompting if none was given."""
    if args.country is not None:
        return args.country
    _display_countries(dataset)
    click.echo(f"{PROMPT}: ", nl=False)
    # End of input reads as an empty selection, which is simply not found.
    return click.get_text_stream("stdin").readline()


def _run(monitor: CarbonMonitor, args: argparse.Namespace) -> int:
    """Execute the pipeline and print results.

    Returns
    -------
    int
        Exit code.
    """
    try:
        dataset = monitor.load()
    except (DestinationUnwritable, TransportFailure) as e:
        _error(str(e))
        _error("Failed to download dataset.")
        return 1
    except EmptyDatasetError as e:
        _error(str(e))
        return 1
    except OSError as e:
        _error(f"Unable to read dataset: {e}")
        return 1

    country = _select_country(args, dataset)

    try:
        analysis = monitor.analyze(dataset, country)
    except CountryNotFound as e:
        _error(str(e))
        return 0

    click.echo(f"\n{analysis.text}", nl=False)

    try:
        path = monitor.save(analysis)
    except ReportDestinationUnwritable as e:
        _error(str(e))
        return 1
    click.echo(f"Report saved to {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Parameters
    ----------
    argv : list[str] | None
        Arguments to parse; ``None`` reads ``sys.argv``.

    Returns
    -------
    int
        Exit code.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _resolve_config(args)
    except (FileNotFoundError, ConfigError) as e:
        click.echo(f"Config error: {e}", err=True)
        return 1

    click.echo(click.style(f"Welcome to the {TOOL_NAME}!", bold=True, fg="cyan"))

    try:
        code = _run(CarbonMonitor(config), args)
    except KeyboardInterrupt:
        click.echo(click.style("\nInterrupted by user", bold=True, fg="red"), err=True)
        return 130

    if code == 0:
        click.echo(f"\nThank you for using the {TOOL_NAME}!")
    return code


def _get_version() -> str:
    """Get the package version.

    Returns
    -------
    str
        Version string.
    """
    from . import __version__

    return __version__
