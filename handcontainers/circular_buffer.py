"""Fixed-capacity ring buffer that overwrites its oldest element when full."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Ring buffer of fixed capacity; pushing onto a full buffer drops the oldest item."""

    __slots__ = ("_data", "_head", "_count")

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity should be > 0")
        self._data: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """Maximum number of items held at once."""
        return len(self._data)

    def push(self, value: T) -> None:
        """Append ``value``, overwriting the oldest item if the buffer is full."""
        cap = len(self._data)
        self._data[(self._head + self._count) % cap] = value
        if self._count == cap:
            self._head = (self._head + 1) % cap
        else:
            self._count += 1

    def pop(self) -> T:
        """Remove and return the oldest item."""
        if not self._count:
            raise IndexError("Buffer is empty")
        value = self._data[self._head]
        self._data[self._head] = None
        self._head = (self._head + 1) % len(self._data)
        self._count -= 1
        return value

    def front(self) -> T:
        """Return the oldest item without removing it."""
        if not self._count:
            raise IndexError("Buffer is empty")
        return self._data[self._head]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._data)

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> T:
        index = operator.index(index)
        if not 0 <= index < self._count:
            raise IndexError("Index out of range")
        return self._data[(self._head + index) % len(self._data)]

    def __iter__(self) -> Iterator[T]:
        cap = len(self._data)
        for offset in range(self._count):
            yield self._data[(self._head + offset) % cap]

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self.capacity}, items={list(self)!r})"