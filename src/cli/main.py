"""CLI entry point (Typer).

The CLI is the presentation layer: it only talks to `ListDataGetter` /
`fetch_listings`, renders `DisplayRecord`s with Rich and decides how each
error kind is reported (log line + empty table, non-zero exit code).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_records_json
from adapters.request_builder import resource_url
from adapters.service_performer import ServicePerformer
from cli import doctor
from cli.ui_components import (
    build_records_table,
    build_resources_table,
    build_summary_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import DisplayRecord
from core.domain.resources import Resource
from core.domain.results import FetchOutcome
from core.services.list_data_getter import ListDataGetter, ResourceListing, fetch_listings

app = typer.Typer(
    no_args_is_help=True,
    help="Browse the collections of a read-only JSON REST API.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()

logger = logging.getLogger("restlist")


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Set up logging for the CLI (stderr, so tables on stdout stay clean)."""

    level = getattr(logging, log_level.upper())
    root = logging.getLogger("restlist")
    root.setLevel(level)

    # Rebind on every call: sys.stderr may have been swapped since the last one.
    for old in list(root.handlers):
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
    return root


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level)


async def _fetch_one(resource: Resource, settings: AppSettings) -> FetchOutcome[DisplayRecord]:
    async with ServicePerformer(settings) as performer:
        getter = ListDataGetter(resource, performer)
        return await getter.get_all()


async def _fetch_many(resources: tuple[Resource, ...], settings: AppSettings) -> list[ResourceListing]:
    async with ServicePerformer(settings) as performer:
        return await fetch_listings(resources, performer)


@app.command("resources")
def list_resources() -> None:
    """Show every known resource and the URL it is fetched from."""

    settings = AppSettings()
    rows = [(resource, resource_url(resource, settings)) for resource in Resource.all()]
    _console.print(build_resources_table(rows))


@app.command("list")
def list_command(
    resource: Resource = typer.Argument(..., case_sensitive=False, help="Collection to fetch."),
    json_path: Optional[Path] = typer.Option(
        None,
        "--json",
        help="Also export the displayed records to this JSON file.",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the welcome banner."),
) -> None:
    """Fetch one collection and render it as a table."""

    settings = AppSettings()
    if banner:
        print_banner(_console)

    logger.debug("GET %s", resource_url(resource, settings))
    outcome = asyncio.run(_fetch_one(resource, settings))

    records: tuple[DisplayRecord, ...] = ()
    if outcome.items is not None:
        records = outcome.items
        logger.info("Fetched %d %s", len(records), resource.value)
    else:
        assert outcome.error is not None
        logger.error("%s: %s", resource.value, outcome.error.describe())

    _console.print(build_records_table(resource, records))

    if outcome.error is not None:
        raise typer.Exit(code=1)

    if json_path is not None:
        out = export_records_json(records=records, output_path=json_path)
        _console.print(f"[green]Saved:[/green] {out}")


@app.command("all")
def all_command() -> None:
    """Fetch every collection concurrently and summarise the results."""

    settings = AppSettings()
    listings = asyncio.run(_fetch_many(Resource.all(), settings))

    failed = False
    for listing in listings:
        if listing.outcome.error is not None:
            failed = True
            logger.error("%s: %s", listing.resource.value, listing.outcome.error.describe())

    _console.print(build_summary_table(listings))
    if failed:
        raise typer.Exit(code=1)


def run() -> None:
    app()
