"""Doubly linked list built around a circular sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList(Generic[T]):
    """Doubly linked list with constant-time insertion and removal at both ends."""

    __slots__ = ("_sentinel", "_size")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._sentinel = _Node(None)
        self._size = 0
        self.extend(items)

    def _link_after(self, anchor: _Node, value: T) -> None:
        node = _Node(value)
        node.prev = anchor
        node.next = anchor.next
        anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end."""
        self._link_after(self._sentinel.prev, value)

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the beginning."""
        self._link_after(self._sentinel, value)

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if not self._size:
            raise IndexError("pop from empty list")
        return self._unlink(self._sentinel.prev)

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if not self._size:
            raise IndexError("pop from empty list")
        return self._unlink(self._sentinel.next)

    def front(self) -> T:
        """Return the first item."""
        if not self._size:
            raise IndexError("list is empty")
        return self._sentinel.next.value

    def back(self) -> T:
        """Return the last item."""
        if not self._size:
            raise IndexError("list is empty")
        return self._sentinel.prev.value

    def clear(self) -> None:
        """Remove every item."""
        while self._size:
            self.pop_front()

    def extend(self, items: Iterable[T]) -> None:
        """Append every item of ``items`` at the end."""
        for value in items:
            self.push_back(value)

    def copy(self) -> LinkedList[T]:
        """Return a new list holding the same items in the same order."""
        return LinkedList(self)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __copy__(self) -> LinkedList[T]:
        return self.copy()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"