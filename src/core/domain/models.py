"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La validación estricta del payload JSON es exactamente la frontera entre
  "respuesta correcta" y "error de decodificación".
- Los alias camelCase quedan declarados junto al campo (sin mappers a mano).

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- Solo se modela un subconjunto de campos; las claves extra se ignoran.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.resources import Resource


class DisplayRecord(BaseModel):
    """Proyección {id, title, subtitle} que consume la capa de presentación."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Identificador copiado del elemento origen.")
    title: str = Field(..., description="Texto principal de la fila.")
    subtitle: str = Field(default="", description="Texto secundario (puede ser vacío).")


class ElementModel(BaseModel):
    """Base de todos los elementos decodificados de una colección.

    Reglas:
    - `strict=True`: un `"1"` no es un entero ni `"true"` un booleano.
    - `frozen=True`: un elemento decodificado no se modifica.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        populate_by_name=True,
    )

    id: int = Field(..., description="Identificador único dentro de la colección.")

    def to_display_record(self) -> DisplayRecord:
        raise NotImplementedError


class Post(ElementModel):
    user_id: int = Field(..., alias="userId", description="Usuario autor del post.")
    title: str
    body: str

    def to_display_record(self) -> DisplayRecord:
        return DisplayRecord(id=self.id, title=self.title, subtitle=self.body)


class Comment(ElementModel):
    post_id: int = Field(..., alias="postId", description="Post comentado.")
    name: str
    email: str
    body: str

    def to_display_record(self) -> DisplayRecord:
        return DisplayRecord(id=self.id, title=self.name, subtitle=self.body)


class Album(ElementModel):
    user_id: int = Field(..., alias="userId", description="Usuario propietario del álbum.")
    title: str

    def to_display_record(self) -> DisplayRecord:
        return DisplayRecord(id=self.id, title=self.title, subtitle="")


class Photo(ElementModel):
    album_id: int = Field(..., alias="albumId", description="Álbum contenedor.")
    title: str
    url: str
    # La API pública sirve `thumbnailUrl`; se acepta también `thumbnail`.
    thumbnail: str = Field(
        ...,
        validation_alias=AliasChoices("thumbnail", "thumbnailUrl"),
        description="URL de la miniatura.",
    )

    def to_display_record(self) -> DisplayRecord:
        return DisplayRecord(id=self.id, title=self.title, subtitle="")


class Todo(ElementModel):
    user_id: int = Field(..., alias="userId", description="Usuario propietario de la tarea.")
    title: str
    completed: bool

    def to_display_record(self) -> DisplayRecord:
        subtitle = "Completed" if self.completed else "In progress"
        return DisplayRecord(id=self.id, title=self.title, subtitle=subtitle)


class User(ElementModel):
    """Usuario muy básico: la API expone bastantes más campos (address, company...)."""

    name: str
    username: str
    email: str

    def to_display_record(self) -> DisplayRecord:
        return DisplayRecord(id=self.id, title=self.name, subtitle=self.username)


ELEMENT_TYPES: dict[Resource, type[ElementModel]] = {
    Resource.POSTS: Post,
    Resource.COMMENTS: Comment,
    Resource.ALBUMS: Album,
    Resource.PHOTOS: Photo,
    Resource.TODOS: Todo,
    Resource.USERS: User,
}


def adapt_to_display(items: Iterable[ElementModel]) -> list[DisplayRecord]:
    """Adapta una secuencia completa, 1:1 y respetando el orden."""

    return [item.to_display_record() for item in items]
