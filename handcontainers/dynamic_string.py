"""Mutable character string that manages its own capacity."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import TextIO, Union

_Text = Union[str, "DynamicString"]


def _chars_of(text: object) -> list[str]:
    if isinstance(text, DynamicString):
        return list(text._chars)
    if isinstance(text, str):
        return list(text)
    raise TypeError(f"expected str or DynamicString, got {type(text).__name__}")


def _check_char(char: object) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("expected a single character")
    return char


class DynamicString:
    """A growable string with explicit capacity and in-place editing."""

    __slots__ = ("_chars", "_capacity")

    def __init__(self, text: _Text | Iterable[str] = "") -> None:
        if isinstance(text, (str, DynamicString)):
            chars = _chars_of(text)
        else:
            chars = [_check_char(c) for c in text]
        self._chars: list[str] = chars
        self._capacity = len(chars)

    @classmethod
    def read_word(cls, stream: TextIO) -> DynamicString:
        """Read characters from ``stream`` up to the first whitespace or end of input.

        The terminating whitespace character is consumed and not stored.
        """
        word = cls()
        while True:
            char = stream.read(1)
            if not char or char.isspace():
                return word
            word.push_back(char)

    def assign(self, text: _Text) -> None:
        """Replace the content; the capacity grows only if the new text needs it."""
        chars = _chars_of(text)
        if len(chars) > self._capacity:
            self._capacity = len(chars)
        self._chars = chars

    @property
    def capacity(self) -> int:
        """Number of characters the string can hold before it must grow."""
        return self._capacity

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to at least ``capacity``."""
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current length."""
        if len(self._chars) < self._capacity:
            self._capacity = len(self._chars)

    def push_back(self, char: str) -> None:
        """Append one character, doubling the capacity if the string is full."""
        char = _check_char(char)
        if len(self._chars) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2
        self._chars.append(char)

    def pop_back(self) -> None:
        """Remove the last character; does nothing on an empty string."""
        if self._chars:
            self._chars.pop()

    def append(self, text: _Text) -> None:
        """Append ``text``, growing the capacity to exactly what is needed."""
        chars = _chars_of(text)
        self.reserve(len(self._chars) + len(chars))
        self._chars.extend(chars)

    def append_repeated(self, count: int, char: str) -> None:
        """Append ``count`` copies of ``char``."""
        char = _check_char(char)
        if count < 0:
            raise ValueError("count must not be negative")
        self.reserve(len(self._chars) + count)
        self._chars.extend(char * count)

    def substr(self, pos: int, count: int | None = None) -> DynamicString:
        """Return up to ``count`` characters starting at ``pos`` (all of the rest when None)."""
        pos = operator.index(pos)
        size = len(self._chars)
        if not 0 <= pos <= size:
            raise IndexError("Position out of range")
        if count is None or pos + count > size:
            count = size - pos
        elif count < 0:
            raise ValueError("count must not be negative")
        result = DynamicString()
        result.reserve(count)
        result._chars = self._chars[pos : pos + count]
        return result

    def find(self, needle: _Text, pos: int = 0) -> int:
        """Return the lowest index of ``needle`` at or after ``pos``, or -1 if absent."""
        pos = operator.index(pos)
        if pos < 0:
            raise ValueError("pos must not be negative")
        return "".join(self._chars).find("".join(_chars_of(needle)), pos)

    def clear(self) -> None:
        """Remove every character; the capacity is kept."""
        self._chars.clear()

    def is_empty(self) -> bool:
        return not self._chars

    def copy(self) -> DynamicString:
        """Return an independent string with the same content and capacity."""
        duplicate = DynamicString(self)
        duplicate._capacity = self._capacity
        return duplicate

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, index: int) -> str:
        index = operator.index(index)
        size = len(self._chars)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("Index out of range")
        return self._chars[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __add__(self, other: object) -> DynamicString:
        if not isinstance(other, (str, DynamicString)):
            return NotImplemented
        result = DynamicString()
        extra = _chars_of(other)
        result.reserve(len(self._chars) + len(extra))
        result._chars = self._chars + extra
        return result

    def __iadd__(self, other: object) -> DynamicString:
        if not isinstance(other, (str, DynamicString)):
            return NotImplemented
        self.append(other)
        return self

    @staticmethod
    def _text_of(other: object) -> str | None:
        if isinstance(other, DynamicString):
            return "".join(other._chars)
        if isinstance(other, str):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return str(self) == text

    def __lt__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return str(self) < text

    def __le__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return not text < str(self)

    def __gt__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return text < str(self)

    def __ge__(self, other: object) -> bool:
        text = self._text_of(other)
        if text is None:
            return NotImplemented
        return not str(self) < text

    def __hash__(self) -> int:
        return hash(str(self))

    def __copy__(self) -> DynamicString:
        return self.copy()

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"DynamicString({str(self)!r})"