"""Construcción de requests de lectura.

Función pura: mismo recurso + misma configuración => misma request.

Nota:
- `AsyncClient.send` no mezcla los headers ni el timeout por defecto del
  cliente, así que la request los lleva consigo.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.resources import Resource

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def resource_url(resource: Resource, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    return f"{settings.base_url}{resource.path}"


def build_request(resource: Resource, settings: AppSettings | None = None) -> httpx.Request:
    """GET `<base_url><path>` con el par de headers JSON; sin query, body ni auth."""

    settings = settings or AppSettings()
    headers = {**JSON_HEADERS, "User-Agent": settings.user_agent}
    return httpx.Request(
        "GET",
        resource_url(resource, settings),
        headers=headers,
        extensions={"timeout": httpx.Timeout(settings.http_timeout_seconds).as_dict()},
    )
