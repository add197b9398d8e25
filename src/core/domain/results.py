"""Resultado discriminado de una lectura y taxonomía cerrada de errores.

Por qué valores y no excepciones:
- El llamador distingue "reintentar más tarde" (red/5xx), "nada que mostrar"
  (sin datos) y "nuestro código está mal" (decodificación) sin conocer httpx.
- Cada llamada produce exactamente un `FetchOutcome`: éxito o un error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ErrorKind(str, Enum):
    """Closed set of failure kinds, in the order they are checked."""

    CLIENT_ERROR = "client_error"
    UNEXPECTED_ERROR = "unexpected_error"
    HTTP_ERROR = "http_error"
    NO_DATA = "no_data"
    DECODING_ERROR = "decoding_error"


@dataclass(frozen=True)
class ServiceError:
    """Un error terminal de la capa de servicio.

    - `message`: solo para `CLIENT_ERROR` (descripción del fallo de transporte).
    - `status_code`: solo para `HTTP_ERROR`.
    - `cause`: excepción original (si existe) para inspección programática;
      no participa en la igualdad.
    """

    kind: ErrorKind
    message: str | None = None
    status_code: int | None = None
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    @classmethod
    def client_error(cls, message: str, cause: BaseException | None = None) -> "ServiceError":
        return cls(kind=ErrorKind.CLIENT_ERROR, message=message, cause=cause)

    @classmethod
    def unexpected_error(cls) -> "ServiceError":
        return cls(kind=ErrorKind.UNEXPECTED_ERROR)

    @classmethod
    def http_error(cls, status_code: int) -> "ServiceError":
        return cls(kind=ErrorKind.HTTP_ERROR, status_code=status_code)

    @classmethod
    def no_data(cls) -> "ServiceError":
        return cls(kind=ErrorKind.NO_DATA)

    @classmethod
    def decoding_error(cls) -> "ServiceError":
        return cls(kind=ErrorKind.DECODING_ERROR)

    def describe(self) -> str:
        """Human readable description for logs and the CLI."""

        if self.kind is ErrorKind.CLIENT_ERROR:
            return f"Client error: {self.message}"
        if self.kind is ErrorKind.HTTP_ERROR:
            return f"HTTP error: status {self.status_code}"
        if self.kind is ErrorKind.NO_DATA:
            return "No data: the server returned an empty body"
        if self.kind is ErrorKind.DECODING_ERROR:
            return "Decoding error: the payload does not match the expected shape"
        return "Unexpected error: the response carried no HTTP status"


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    """Éxito (`items`) o fallo (`error`); nunca ambos, nunca ninguno."""

    items: tuple[T, ...] | None = None
    error: ServiceError | None = None

    def __post_init__(self) -> None:
        if (self.items is None) == (self.error is None):
            raise ValueError("FetchOutcome requiere exactamente uno de items/error")

    @classmethod
    def success(cls, items: Iterable[T]) -> "FetchOutcome[T]":
        return cls(items=tuple(items))

    @classmethod
    def failure(cls, error: ServiceError) -> "FetchOutcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def map(self, fn: Callable[[tuple[T, ...]], Iterable[U]]) -> "FetchOutcome[U]":
        """Transforma los items de un éxito; un error pasa sin cambios."""

        if self.items is None:
            assert self.error is not None
            return FetchOutcome(error=self.error)
        return FetchOutcome(items=tuple(fn(self.items)))
