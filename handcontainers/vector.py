"""Growable array that tracks its own capacity and doubles it when full."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Vector(Generic[T]):
    """Dynamic array with explicit capacity management and lexicographic ordering."""

    __slots__ = ("_items", "_capacity")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._capacity = len(self._items)

    @classmethod
    def filled(cls, count: int, value: T) -> Vector[T]:
        """Return a vector of ``count`` copies of ``value`` with capacity ``count``."""
        if count < 0:
            raise ValueError("count must not be negative")
        return cls([value] * count)

    @property
    def capacity(self) -> int:
        """Number of items the vector can hold before it must grow."""
        return self._capacity

    def _grow_for_one(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def push_back(self, value: T) -> None:
        """Append ``value``, doubling the capacity if the vector is full."""
        self._grow_for_one()
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()

    def resize(self, size: int, value: Any = None) -> None:
        """Shrink to ``size`` items or pad with ``value`` up to ``size`` items."""
        if size < 0:
            raise ValueError("size must not be negative")
        current = len(self._items)
        if size < current:
            del self._items[size:]
        elif size > current:
            if size > self._capacity:
                self._capacity = max(size, self._capacity * 2)
            self._items.extend([value] * (size - current))

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to at least ``capacity``."""
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current number of items."""
        if len(self._items) < self._capacity:
            self._capacity = len(self._items)

    def at(self, index: int) -> T:
        """Return the item at a non-negative ``index``, checking bounds."""
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of range")
        return self._items[index]

    def front(self) -> T:
        """Return the first item."""
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[0]

    def back(self) -> T:
        """Return the last item."""
        if not self._items:
            raise IndexError("vector is empty")
        return self._items[-1]

    def insert(self, index: int, value: T) -> int:
        """Insert ``value`` before position ``index`` and return that position."""
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError("insert position out of range")
        self._grow_for_one()
        self._items.insert(index, value)
        return index

    def erase(self, index: int) -> int:
        """Remove the item at ``index`` and return the position that follows it."""
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError("erase position out of range")
        del self._items[index]
        return index

    def swap(self, other: Vector[T]) -> None:
        """Exchange contents and capacity with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def copy(self) -> Vector[T]:
        """Return a new vector with the same items and the same capacity."""
        duplicate: Vector[T] = Vector(self._items)
        duplicate._capacity = self._capacity
        return duplicate

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def _checked(self, index: int) -> int:
        index = operator.index(index)
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("vector index out of range")
        return index

    def __getitem__(self, index: int) -> T:
        return self._items[self._checked(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._checked(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items < other._items

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not other._items < self._items

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return other._items < self._items

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return not self._items < other._items

    def __copy__(self) -> Vector[T]:
        return self.copy()

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"