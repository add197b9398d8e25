"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos (list, all, resources).
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import DisplayRecord
from core.domain.resources import Resource
from core.services.list_data_getter import ResourceListing


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("RESTLIST", style="bold cyan")
    subtitle = Text("posts • comments • albums • photos • todos • users", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_records_table(resource: Resource, records: Sequence[DisplayRecord]) -> Table:
    """Tabla de una colección; el título es el nombre del recurso en mayúsculas."""

    table = Table(title=resource.header())
    table.add_column("ID", style="cyan", no_wrap=True, justify="right")
    table.add_column("Title", style="white")
    table.add_column("Subtitle", style="dim")
    for record in records:
        table.add_row(str(record.id), record.title, record.subtitle)
    return table


def build_resources_table(rows: Sequence[tuple[Resource, str]]) -> Table:
    table = Table(title="Resources")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("URL", style="magenta")
    for resource, url in rows:
        table.add_row(resource.value, resource.path, url)
    return table


def build_summary_table(listings: Sequence[ResourceListing]) -> Table:
    table = Table(title="Summary")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("Items", style="green", justify="right")
    table.add_column("Error", style="red")
    for listing in listings:
        outcome = listing.outcome
        if outcome.items is not None:
            table.add_row(listing.resource.value, str(len(outcome.items)), "")
        else:
            assert outcome.error is not None
            table.add_row(listing.resource.value, "-", outcome.error.describe())
    return table
