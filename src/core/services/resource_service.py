"""Servicio genérico por recurso.

Un `ResourceService` se construye con el recurso explícito: el endpoint nunca
se deduce inspeccionando el tipo del elemento. Un servicio por colección, todos
con la misma clase.
"""

from __future__ import annotations

from typing import Generic, TypeVar, cast

from adapters.service_performer import ServicePerformer
from core.domain.models import ElementModel
from core.domain.resources import Resource
from core.domain.results import FetchOutcome

T = TypeVar("T", bound=ElementModel)


class ResourceService(Generic[T]):
    """Fachada tipada: un recurso, un tipo de elemento, una operación."""

    def __init__(
        self,
        resource: Resource,
        performer: ServicePerformer,
        element_type: type[T] | None = None,
    ) -> None:
        self._resource = resource
        self._performer = performer
        self._element_type = element_type or cast("type[T]", resource.element_type)

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def element_type(self) -> type[T]:
        return self._element_type

    async def get_all(self) -> FetchOutcome[T]:
        return await self._performer.perform_get_all(self._resource, self._element_type)
