"""Fixed-size array container."""

from __future__ import annotations

import operator
from typing import Any, Iterator


class Array:
    """A sequence of fixed length whose elements can be read and replaced."""

    __slots__ = ("_items",)

    def __init__(self, size: int, fill: Any = None) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"array size must be non-negative, got {size}")
        self._items = [fill] * size

    def _position(self, index: int) -> int:
        position = operator.index(index)
        length = len(self._items)
        if position < 0:
            position += length
        if not 0 <= position < length:
            raise IndexError(f"array index {index} out of range for size {length}")
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
        if not isinstance(other, Array):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def copy(self) -> Array:
        """Return an independent array with the same elements."""
        duplicate = Array(0)
        duplicate._items = list(self._items)
        return duplicate