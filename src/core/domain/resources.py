"""Catálogo de recursos de la API.

This module is the single source of truth for the collection endpoints the
client knows about. The set is closed: each member maps to exactly one path
segment under the configured base URL and to one element shape.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.domain.models import ElementModel


class Resource(str, Enum):
    """Logical collection endpoints, in menu order."""

    POSTS = "posts"
    COMMENTS = "comments"
    ALBUMS = "albums"
    PHOTOS = "photos"
    TODOS = "todos"
    USERS = "users"

    @classmethod
    def all(cls) -> tuple["Resource", ...]:
        """Return every resource in declaration order."""

        return tuple(cls)

    @property
    def path(self) -> str:
        """URL path segment relative to the base address."""

        return self.value

    @property
    def element_type(self) -> type["ElementModel"]:
        """Element shape decoded from this resource's collection."""

        from core.domain.models import ELEMENT_TYPES  # noqa: PLC0415

        return ELEMENT_TYPES[self]

    def header(self) -> str:
        """Header label for list views."""

        return self.value.upper()
