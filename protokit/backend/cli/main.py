#!/usr/bin/env python3
"""
Protokit command line.

Serves one of the prototype sites, seeds a SQL database with a site's demo
data, and lists what is available:

    protokit sites
    protokit serve tiktalk --storage sql --database-url sqlite:///tiktalk.db
    protokit seed imusic --database-url sqlite:///imusic.db
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from protokit import __version__
from protokit.backend.core.storage import BACKENDS, SqlBackend
from protokit.backend.core.utils.config import get_settings
from protokit.backend.core.utils.logging_setup import setup_logging
from protokit.backend.sites import all_sites, get_site

console = Console()
logger = logging.getLogger(__name__)


def print_banner(title: str) -> None:
    """Print the banner for the site being served."""
    console.print(f"\n[bold blue]{title}[/bold blue] [dim]· protokit {__version__}[/dim]\n")


def _site_or_exit(name: str):
    try:
        return get_site(name)
    except KeyError as e:
        console.print(f"[bold red]Error:[/bold red] {e.args[0]}")
        raise SystemExit(1) from e


@click.group()
@click.version_option(__version__, prog_name="protokit")
def cli() -> None:
    """Prototype web backends over in-memory or SQL storage."""


@cli.command()
def sites() -> None:
    """List the available sites and their collections."""
    table = Table(title="Sites")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Collections", style="dim")
    for site in all_sites().values():
        table.add_row(site.name, site.title, ", ".join(site.storage_class.collections))
    console.print(table)


@cli.command()
@click.argument("site_name", metavar="SITE")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    default=None,
    help="Path to configuration file.",
)
@click.option("--storage", type=click.Choice(BACKENDS), default=None, help="Storage backend.")
@click.option("--database-url", default=None, help="SQLAlchemy URL for the sql backend.")
@click.option("--host", default=None, help="Interface to bind.")
@click.option("--port", type=int, default=None, help="Port to listen on.")
@click.option("--no-seed", is_flag=True, default=False, help="Start with empty storage.")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write logs to this file.")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def serve(
    site_name: str,
    config: str | None,
    storage: str | None,
    database_url: str | None,
    host: str | None,
    port: int | None,
    no_seed: bool,
    log_file: str | None,
    debug: bool,
) -> None:
    """Run the API for SITE with uvicorn."""
    import uvicorn

    from protokit.backend.api.app import create_app

    site = _site_or_exit(site_name)

    try:
        settings = get_settings(config)
    except FileNotFoundError as e:
        console.print(f"\n[bold red]Configuration error:[/bold red] {e}")
        raise SystemExit(1) from e

    settings.site = site.name
    if database_url:
        settings.storage.url = database_url
        settings.storage.backend = storage or "sql"
    elif storage:
        settings.storage.backend = storage
    if host:
        settings.server.host = host
    if port:
        settings.server.port = port
    if no_seed:
        settings.storage.seed = False

    if log_file:
        settings.logging.file = log_file
    setup_logging(settings.logging, level="DEBUG" if debug else None)
    print_banner(site.title)
    console.print(f"  Storage: {settings.storage.backend}"
                  + (f" ({settings.storage.url})" if settings.storage.backend == "sql" else ""))
    console.print(f"  Listening on http://{settings.server.host}:{settings.server.port}/api\n")

    application = create_app(site.name, settings=settings)
    uvicorn.run(application, host=settings.server.host, port=settings.server.port, log_config=None)


@cli.command()
@click.argument("site_name", metavar="SITE")
@click.option("--database-url", required=True, help="SQLAlchemy URL of the database to fill.")
@click.option("--reset", is_flag=True, default=False, help="Drop the site's tables first.")
def seed(site_name: str, database_url: str, reset: bool) -> None:
    """Create the tables for SITE and insert its demo data."""
    site = _site_or_exit(site_name)
    setup_logging(level=logging.WARNING)

    backend = SqlBackend(database_url)
    try:
        if reset:
            backend.drop_tables(site.storage_class.collections)
        storage = site.storage_class(backend)
        if not storage.is_empty():
            console.print(f"[yellow]{site.title} data already present, nothing to do.[/yellow]")
            console.print("Use --reset to replace it.")
            return
        site.seed(storage)
        counts = storage.counts()
    finally:
        backend.close()

    table = Table(title=f"{site.title} seeded")
    table.add_column("Collection", style="cyan")
    table.add_column("Rows", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)


@cli.command("check-deps")
def check_deps() -> None:
    """Verify that every runtime package can be imported."""
    from protokit.backend.cli.check_deps import main as run_check

    raise SystemExit(run_check())


if __name__ == "__main__":
    cli()
