"""Linked list with item handles for positional insertion and removal."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class Item:
    """A node of a :class:`LinkedList`, holding one value."""

    __slots__ = ("data", "_next", "_prev", "_owner")

    def __init__(self, data: Any, owner: "LinkedList") -> None:
        self.data = data
        self._next: Optional[Item] = None
        self._prev: Optional[Item] = None
        self._owner: Optional[LinkedList] = owner

    @property
    def next(self) -> Optional[Item]:
        """The item following this one, or None at the end."""
        return self._next

    @property
    def prev(self) -> Optional[Item]:
        """The item preceding this one, or None at the start."""
        return self._prev

    def __repr__(self) -> str:
        return f"Item({self.data!r})"


class LinkedList:
    """A linked list that inserts at the front or after a given item."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Item] = None
        self._size = 0
        tail: Optional[Item] = None
        for value in items:
            tail = self.insert(value) if tail is None else self.insert_after(tail, value)

    def _check_owner(self, item: Item) -> None:
        if item._owner is not self:
            raise ValueError("item does not belong to this list")

    def first(self) -> Optional[Item]:
        """Return the first item, or None when the list is empty."""
        return self._head

    def insert(self, data: Any) -> Item:
        """Insert a value at the beginning and return its item."""
        item = Item(data, self)
        item._next = self._head
        if self._head is not None:
            self._head._prev = item
        self._head = item
        self._size += 1
        return item

    def insert_after(self, item: Item, data: Any) -> Item:
        """Insert a value right after ``item`` and return the new item."""
        self._check_owner(item)
        new = Item(data, self)
        new._prev = item
        new._next = item._next
        if item._next is not None:
            item._next._prev = new
        item._next = new
        self._size += 1
        return new

    def erase_first(self) -> Optional[Item]:
        """Remove the first item; return the item that now comes first."""
        removed = self._head
        if removed is None:
            raise IndexError("erase from empty list")
        self._head = removed._next
        if self._head is not None:
            self._head._prev = None
        self._detach(removed)
        return self._head

    def erase_next(self, item: Item) -> Optional[Item]:
        """Remove the item after ``item``; return the one that follows it."""
        self._check_owner(item)
        removed = item._next
        if removed is None:
            raise IndexError("no item follows the given item")
        item._next = removed._next
        if removed._next is not None:
            removed._next._prev = item
        self._detach(removed)
        return item._next

    def _detach(self, item: Item) -> None:
        item._next = None
        item._prev = None
        item._owner = None
        self._size -= 1

    def _items(self) -> Iterator[Item]:
        node = self._head
        while node is not None:
            yield node
            node = node._next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._items())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def copy(self) -> LinkedList:
        """Return an independent list with the same values in the same order."""
        return LinkedList(self)