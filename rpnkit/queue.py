"""First-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class Queue:
    """A FIFO queue; iteration runs from the front to the back."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def insert(self, data: Any) -> None:
        """Add a value at the back of the queue."""
        self._items.append(data)

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def remove(self) -> Any:
        """Remove the front value and return it."""
        if not self._items:
            raise IndexError("remove from empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def copy(self) -> Queue:
        """Return an independent queue with the same contents."""
        return Queue(self._items)