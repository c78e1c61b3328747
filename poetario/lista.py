"""A list addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_POSICION_INVALIDA = "Posicion invalida"


class Lista(Generic[T]):
    """Ordered collection whose positions run from 1 to ``len(lista)``."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def lista_vacia(self) -> bool:
        """Return True when the list holds no elements."""
        return not self._items

    def insertar_inicio(self, info: T) -> None:
        """Insert ``info`` at position 1."""
        self._items.insert(0, info)

    def insertar_final(self, info: T) -> None:
        """Append ``info`` after the last element."""
        self._items.append(info)

    def insertar_pos(self, info: T, pos: int) -> None:
        """Insert ``info`` so that it ends up at ``pos`` (1 to len + 1)."""
        if pos < 1 or pos > len(self._items) + 1:
            raise IndexError(_POSICION_INVALIDA)
        self._items.insert(pos - 1, info)

    def borrar_pos(self, pos: int) -> T:
        """Remove and return the element at ``pos``."""
        self._check(pos)
        return self._items.pop(pos - 1)

    def modificar_pos(self, info: T, pos: int) -> None:
        """Replace the element at ``pos`` with ``info``."""
        self._check(pos)
        self._items[pos - 1] = info

    def buscar_pos(self, pos: int) -> T:
        """Return the element at ``pos``."""
        self._check(pos)
        return self._items[pos - 1]

    def _check(self, pos: int) -> None:
        if pos < 1 or pos > len(self._items):
            raise IndexError(_POSICION_INVALIDA)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lista):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Lista({self._items!r})"