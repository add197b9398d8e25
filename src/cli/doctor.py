"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.service_performer import ServicePerformer
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import User
from core.domain.resources import Resource
from core.domain.results import FetchOutcome

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _probe(settings: AppSettings) -> FetchOutcome[User]:
    async with ServicePerformer(settings) as performer:
        return await performer.perform_get_all(Resource.USERS, User)


@app.command()
def run() -> None:
    """Show the active configuration and probe the API."""

    settings = AppSettings()

    table = Table(title="restlist Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    outcome = asyncio.run(_probe(settings))
    if outcome.items is not None:
        table.add_row("API probe", "OK", f"{len(outcome.items)} users")
    else:
        assert outcome.error is not None
        table.add_row("API probe", "FAIL", outcome.error.describe())

    _console.print(table)

    if not outcome.ok:
        _console.print(
            "\n[yellow]Note:[/yellow] Use `restlist doctor set-base-url URL` to point at another server."
        )
        raise typer.Exit(code=1)


@app.command(name="set-base-url")
def set_base_url(url: str = typer.Argument(..., help="Base address, e.g. http://localhost:3000/")) -> None:
    """Persist a base URL override in the user config .env."""

    try:
        settings = AppSettings(base_url=url)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc.errors()[0]["msg"])) from exc

    env_path = write_user_env_vars({"RESTLIST_BASE_URL": settings.base_url})
    _console.print(f"[green]Saved base URL to:[/green] {env_path}")
