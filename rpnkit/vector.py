"""Resizable array container."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator


class Vector:
    """A dynamic array whose size can grow or shrink."""

    __slots__ = ("_items", "_fill")

    def __init__(self, items: Iterable[Any] = (), fill: Any = None) -> None:
        self._items = list(items)
        self._fill = fill

    def _position(self, index: int) -> int:
        position = operator.index(index)
        length = len(self._items)
        if position < 0:
            position += length
        if not 0 <= position < length:
            raise IndexError(f"vector index {index} out of range for size {length}")
        return position

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def resize(self, size: int) -> None:
        """Change the size, keeping the leading elements and padding with the fill value."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"vector size must be non-negative, got {size}")
        current = len(self._items)
        if size < current:
            del self._items[size:]
        else:
            self._items.extend([self._fill] * (size - current))

    def copy(self) -> Vector:
        """Return an independent vector with the same elements and fill value."""
        return Vector(self._items, self._fill)