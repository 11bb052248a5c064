"""A doubly linked list with node handles."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class ListItem(Generic[T]):
    """A node of a :class:`LinkedList`."""

    __slots__ = ("data", "next", "prev")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[ListItem[T]] = None
        self.prev: Optional[ListItem[T]] = None

    def __repr__(self) -> str:
        return f"ListItem({self.data!r})"


class LinkedList(Generic[T]):
    """Doubly linked list keeping ``start`` and ``end`` nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.start: Optional[ListItem[T]] = None
        self.end: Optional[ListItem[T]] = None
        self._size = 0
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return self._size

    def nodes(self) -> Iterator[ListItem[T]]:
        node = self.start
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __getitem__(self, index: int) -> T:
        node = self.at(index)
        if node is None:
            raise IndexError(f"index {index} out of range")
        return node.data

    def __setitem__(self, index: int, value: T) -> None:
        node = self.at(index)
        if node is None:
            raise IndexError(f"index {index} out of range")
        node.data = value

    def __iadd__(self, other: Iterable[T]) -> LinkedList[T]:
        for item in list(other):
            self.add(item)
        return self

    def add(self, item: T) -> ListItem[T]:
        node = ListItem(item)
        if self.start is None:
            self.start = self.end = node
        else:
            node.prev = self.end
            self.end.next = node
            self.end = node
        self._size += 1
        return node

    def remove(self, node: Optional[ListItem[T]]) -> None:
        if node is None:
            raise ValueError("cannot remove a missing node")
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.start = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.end = node.prev
        node.next = node.prev = None
        self._size -= 1

    def clear(self) -> None:
        self.start = self.end = None
        self._size = 0

    def at(self, index: int) -> Optional[ListItem[T]]:
        """Return the node at ``index`` or None when out of range."""
        if index < 0:
            return None
        for position, node in enumerate(self.nodes()):
            if position == index:
                return node
        return None

    def find(self, data: T) -> int:
        """Return the index of the first item equal to ``data``, or -1."""
        for index, value in enumerate(self):
            if value == data:
                return index
        return -1

    def bubble_sort(self) -> int:
        """Sort values in place; return the number of comparisons made."""
        comparisons = 0
        swapped = True
        while swapped:
            swapped = False
            node = self.start
            while node is not None and node.next is not None:
                comparisons += 1
                if node.data > node.next.data:
                    node.data, node.next.data = node.next.data, node.data
                    swapped = True
                node = node.next
        return comparisons

    def insert_after(self, position: int, other: Iterable[T]) -> None:
        """Insert the items of ``other`` after the node at ``position``."""
        anchor = self.at(position)
        if anchor is None and self._size:
            raise IndexError(f"position {position} out of range")
        for value in list(other):
            node = ListItem(value)
            node.next = anchor.next if anchor is not None else None
            if node.next is not None:
                node.next.prev = node
            else:
                self.end = node
            node.prev = anchor
            if anchor is not None:
                anchor.next = node
            else:
                self.start = node
            anchor = node
            self._size += 1