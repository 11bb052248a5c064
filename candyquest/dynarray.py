"""A growable array that reports its capacity and counts sort comparisons."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

BLOCK_SIZE = 16


class DynArray(Generic[T]):
    """Dynamic array growing in blocks of ``BLOCK_SIZE`` elements."""

    def __init__(self, capacity: int = BLOCK_SIZE) -> None:
        self._items: List[T] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iadd__(self, other: Iterable[T]) -> DynArray[T]:
        extra = list(other)
        needed = len(self._items) + len(extra)
        if needed > self._capacity:
            self._capacity = needed
        self._items.extend(extra)
        return self

    def append(self, element: T) -> None:
        if len(self._items) >= self._capacity:
            self._capacity += BLOCK_SIZE
        self._items.append(element)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from empty DynArray")
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def insert(self, element: T, position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        if position == len(self._items):
            self.append(element)
            return
        if len(self._items) + 1 > self._capacity:
            self._capacity += BLOCK_SIZE
        self._items.insert(position, element)

    def insert_all(self, items: Iterable[T], position: int) -> None:
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        extra = list(items)
        needed = len(self._items) + len(extra)
        if needed > self._capacity:
            self._capacity = needed + 1
        self._items[position:position] = extra

    def at(self, index: int) -> Optional[T]:
        """Return the element at ``index`` or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def bubble_sort(self) -> int:
        """Sort in place; return the number of comparisons made."""
        data = self._items
        comparisons = 0
        swapped = len(data) > 1
        while swapped:
            swapped = False
            for i in range(len(data) - 1):
                comparisons += 1
                if data[i] > data[i + 1]:
                    data[i], data[i + 1] = data[i + 1], data[i]
                    swapped = True
        return comparisons

    def bubble_sort_optimized(self) -> int:
        """Bubble sort that shrinks each pass to the last swap."""
        data = self._items
        comparisons = 0
        last = max(len(data) - 1, 0)
        while last > 0:
            count, last = last, 0
            for i in range(count):
                comparisons += 1
                if data[i] > data[i + 1]:
                    data[i], data[i + 1] = data[i + 1], data[i]
                    last = i
        return comparisons

    def comb_sort(self) -> int:
        """Comb sort with a shrink factor of 1.3."""
        data = self._items
        comparisons = 0
        gap = len(data) - 1
        swapped = True
        while len(data) > 1 and (swapped or gap > 1):
            gap = max(1, int(gap / 1.3))
            swapped = False
            for i in range(len(data) - gap):
                comparisons += 1
                if data[i] > data[i + gap]:
                    data[i], data[i + gap] = data[i + gap], data[i]
                    swapped = True
        return comparisons

    def flip(self) -> None:
        self._items.reverse()