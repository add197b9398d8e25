"""Ejecutor genérico de lecturas "get all".

Por qué un único ejecutor:
- Todas las colecciones comparten el mismo manejo de request/response; lo
  único que cambia es el recurso y el tipo de elemento a decodificar.
- Clasifica cada fallo en la taxonomía cerrada de `ServiceError`, en orden:
  transporte -> envelope -> status -> presencia de body -> decodificación.

Este módulo no loguea ni reintenta: el error se devuelve como valor.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_async_client
from adapters.request_builder import build_request
from core.config import AppSettings
from core.domain.resources import Resource
from core.domain.results import FetchOutcome, ServiceError

E = TypeVar("E")


class AsyncSender(Protocol):
    """Lo único que el ejecutor necesita del transporte (p.ej. `httpx.AsyncClient`)."""

    async def send(self, request: httpx.Request) -> Any:
        ...


@lru_cache(maxsize=None)
def _list_adapter(element_type: type[Any]) -> TypeAdapter[list[Any]]:
    return TypeAdapter(list[element_type])  # type: ignore[valid-type]


def _describe_transport_error(exc: httpx.HTTPError) -> str:
    text = str(exc).strip()
    return text or exc.__class__.__name__


class ServicePerformer:
    """Realiza el GET de una colección y devuelve un `FetchOutcome`.

    El cliente HTTP se crea perezosamente (o se inyecta) y se reutiliza en
    todas las llamadas: es el único recurso compartido.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: AsyncSender | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def client(self) -> AsyncSender:
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self._client

    async def aclose(self) -> None:
        """Cierra el cliente solo si lo creó este ejecutor."""

        if self._owns_client and isinstance(self._client, httpx.AsyncClient):
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ServicePerformer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def build_request(self, resource: Resource) -> httpx.Request:
        return build_request(resource, self._settings)

    async def perform_get_all(self, resource: Resource, element_type: type[E]) -> FetchOutcome[E]:
        request = self.build_request(resource)

        try:
            response = await self.client.send(request)
        except httpx.HTTPError as exc:
            # conectividad, DNS, TLS, timeout o protocolo
            return FetchOutcome.failure(
                ServiceError.client_error(_describe_transport_error(exc), cause=exc)
            )

        if not isinstance(response, httpx.Response):
            return FetchOutcome.failure(ServiceError.unexpected_error())

        if not 200 <= response.status_code < 300:
            return FetchOutcome.failure(ServiceError.http_error(response.status_code))

        body = response.content
        if not body or not body.strip():
            return FetchOutcome.failure(ServiceError.no_data())

        try:
            items = _list_adapter(element_type).validate_json(body)
        except ValidationError:
            return FetchOutcome.failure(ServiceError.decoding_error())

        return FetchOutcome.success(items)
