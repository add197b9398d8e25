"""Contratos de listado.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La capa de presentación depende solo de `ListSource.get_all`, nunca del
  ejecutor HTTP ni del builder de requests.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from core.domain.models import DisplayRecord
from core.domain.results import FetchOutcome

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ListAdaptable(Protocol):
    """Cualquier elemento que sabe proyectarse a un `DisplayRecord`."""

    @property
    def id(self) -> int:
        ...

    def to_display_record(self) -> DisplayRecord:
        ...


@runtime_checkable
class ListSource(Protocol[T_co]):
    """Contrato mínimo de una fuente de colecciones.

    Reglas de diseño:
    - `get_all` es asíncrono porque hace I/O (HTTP).
    - Cada llamada vuelve a pedir la colección: sin estado ni caché.
    """

    async def get_all(self) -> FetchOutcome[T_co]:
        ...
