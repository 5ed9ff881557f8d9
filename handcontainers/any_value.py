"""A type-erased box holding one value of any type, with checked extraction."""

from __future__ import annotations

import copy as _copy
from typing import Any, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


class BadCastError(TypeError):
    """Raised when a box is empty or holds a value of another type."""


class AnyValue:
    """Holds a single value and remembers its exact type."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value = value

    def has_value(self) -> bool:
        return self._value is not _EMPTY

    def type(self) -> type | None:
        """Exact type of the held value, or None when empty."""
        return type(self._value) if self.has_value() else None

    def copy(self) -> AnyValue:
        """Return a new box holding an independent copy of the value."""
        if not self.has_value():
            return AnyValue()
        return AnyValue(_copy.deepcopy(self._value))

    def take(self) -> AnyValue:
        """Move the value into a new box, leaving this one empty."""
        moved = AnyValue(self._value)
        self._value = _EMPTY
        return moved

    def __repr__(self) -> str:
        if not self.has_value():
            return "AnyValue()"
        return f"AnyValue({self._value!r})"


def any_cast(box: AnyValue, expected_type: type[T]) -> T:
    """Return the boxed value if its type is exactly ``expected_type``."""
    if not box.has_value():
        raise BadCastError("AnyValue is empty")
    actual = box.type()
    if actual is not expected_type:
        raise BadCastError(
            f"AnyValue holds {actual.__name__}, not {expected_type.__name__}"
        )
    return box._value