"""Getter de datos para vistas de lista.

Combina el servicio genérico con el adaptador de presentación: lo que sale de
aquí ya son `DisplayRecord`, listos para una tabla.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Iterable

from adapters.service_performer import ServicePerformer
from core.domain.models import DisplayRecord, adapt_to_display
from core.domain.resources import Resource
from core.domain.results import FetchOutcome
from core.services.resource_service import ResourceService


class ListDataGetter:
    """Obtiene una colección y la adapta a `DisplayRecord`.

    Los errores pasan sin cambios; decidir cómo mostrarlos es cosa de la UI.
    """

    def __init__(self, resource: Resource, performer: ServicePerformer) -> None:
        self._service: ResourceService = ResourceService(resource, performer)

    @property
    def resource(self) -> Resource:
        return self._service.resource

    async def get_all(self) -> FetchOutcome[DisplayRecord]:
        outcome = await self._service.get_all()
        return outcome.map(adapt_to_display)


@dataclass
class ResourceListing:
    """Resultado de un recurso dentro de una lectura múltiple."""

    resource: Resource
    outcome: FetchOutcome[DisplayRecord]


async def fetch_listings(
    resources: Iterable[Resource],
    performer: ServicePerformer,
) -> list[ResourceListing]:
    """Lanza una lectura por recurso en paralelo.

    Cada lectura es independiente; el resultado sigue el orden de `resources`
    aunque las respuestas lleguen en cualquier orden.
    """

    getters = [ListDataGetter(resource, performer) for resource in resources]
    outcomes = await asyncio.gather(*(getter.get_all() for getter in getters))
    return [
        ResourceListing(resource=getter.resource, outcome=outcome)
        for getter, outcome in zip(getters, outcomes)
    ]
