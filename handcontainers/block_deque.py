"""Double-ended queue stored as fixed-size blocks referenced from a central map."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

BLOCK_SIZE = 16
INITIAL_MAP_SIZE = 8


def _new_block() -> list[Any]:
    return [None] * BLOCK_SIZE


class BlockDeque(Generic[T]):
    """Deque of blocks; growing past either end of the map reallocates only the map."""

    __slots__ = ("_map", "_start_node", "_start_off", "_finish_node", "_finish_off")

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._reset(INITIAL_MAP_SIZE)
        for value in items:
            self.push_back(value)

    def _reset(self, map_size: int) -> None:
        self._map: list[list[Any] | None] = [None] * map_size
        centre = map_size // 2
        self._map[centre] = _new_block()
        self._start_node = self._finish_node = centre
        self._start_off = self._finish_off = 0

    @property
    def map_size(self) -> int:
        """Number of block slots in the map."""
        return len(self._map)

    def _reallocate_map(self) -> None:
        new_size = len(self._map) * 2
        used = self._map[self._start_node : self._finish_node + 1]
        new_start = (new_size - len(used)) // 2
        new_map: list[list[Any] | None] = [None] * new_size
        new_map[new_start : new_start + len(used)] = used
        self._map = new_map
        self._start_node = new_start
        self._finish_node = new_start + len(used) - 1

    def _block(self, node: int) -> list[Any]:
        block = self._map[node]
        assert block is not None
        return block

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end."""
        self._block(self._finish_node)[self._finish_off] = value
        if self._finish_off == BLOCK_SIZE - 1:
            if self._finish_node == len(self._map) - 1:
                self._reallocate_map()
            if self._map[self._finish_node + 1] is None:
                self._map[self._finish_node + 1] = _new_block()
            self._finish_node += 1
            self._finish_off = 0
        else:
            self._finish_off += 1

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the beginning."""
        if self._start_off == 0:
            if self._start_node == 0:
                self._reallocate_map()
            if self._map[self._start_node - 1] is None:
                self._map[self._start_node - 1] = _new_block()
            self._start_node -= 1
            self._start_off = BLOCK_SIZE
        self._start_off -= 1
        self._block(self._start_node)[self._start_off] = value

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("pop from empty deque")
        if self._finish_off == 0:
            self._finish_node -= 1
            self._finish_off = BLOCK_SIZE
        self._finish_off -= 1
        block = self._block(self._finish_node)
        value, block[self._finish_off] = block[self._finish_off], None
        return value

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self.is_empty():
            raise IndexError("pop from empty deque")
        block = self._block(self._start_node)
        value, block[self._start_off] = block[self._start_off], None
        self._start_off += 1
        if self._start_off == BLOCK_SIZE:
            self._start_node += 1
            self._start_off = 0
        return value

    def front(self) -> T:
        """Return the first item."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._block(self._start_node)[self._start_off]

    def back(self) -> T:
        """Return the last item."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self[len(self) - 1]

    def at(self, index: int) -> T:
        """Return the item at a non-negative ``index``, checking bounds."""
        index = operator.index(index)
        if not 0 <= index < len(self):
            raise IndexError("deq out of range")
        return self[index]

    def copy(self) -> BlockDeque[T]:
        """Return a new deque with the same items and the same map size."""
        duplicate: BlockDeque[T] = BlockDeque()
        duplicate._reset(len(self._map))
        for value in self:
            duplicate.push_back(value)
        return duplicate

    def is_empty(self) -> bool:
        return (
            self._start_node == self._finish_node
            and self._start_off == self._finish_off
        )

    def __len__(self) -> int:
        return (
            (self._finish_node - self._start_node) * BLOCK_SIZE
            + self._finish_off
            - self._start_off
        )

    def _locate(self, index: int) -> tuple[list[Any], int]:
        index = operator.index(index)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("deque index out of range")
        node, off = divmod(self._start_off + index, BLOCK_SIZE)
        return self._block(self._start_node + node), off

    def __getitem__(self, index: int) -> T:
        block, off = self._locate(index)
        return block[off]

    def __setitem__(self, index: int, value: T) -> None:
        block, off = self._locate(index)
        block[off] = value

    def __iter__(self) -> Iterator[T]:
        node, off = self._start_node, self._start_off
        while (node, off) != (self._finish_node, self._finish_off):
            yield self._block(node)[off]
            off += 1
            if off == BLOCK_SIZE:
                node += 1
                off = 0

    def __copy__(self) -> BlockDeque[T]:
        return self.copy()

    def __repr__(self) -> str:
        return f"BlockDeque({list(self)!r})"