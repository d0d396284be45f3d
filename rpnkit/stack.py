"""Last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)

    def push(self, data: Any) -> None:
        """Put a value on top of the stack."""
        self._items.append(data)

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def copy(self) -> Stack:
        """Return an independent stack with the same contents."""
        return Stack(self._items)