"""Ownership handles: a sole owner, a reference-counted owner and a weak observer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Generic, TypeVar

T = TypeVar("T")
Deleter = Callable[[Any], None]


@dataclass
class ControlBlock(Generic[T]):
    """Bookkeeping shared by every handle to one managed value."""

    value: T | None
    deleter: Deleter | None
    strong_count: int = 1
    weak_count: int = 0


class UniquePtr(Generic[T]):
    """Sole owner of a value; it can be moved but not copied."""

    __slots__ = ("_value", "_deleter")

    def __init__(self, value: T | None = None, deleter: Deleter | None = None) -> None:
        self._value = value
        self._deleter = deleter

    def get(self) -> T:
        """Return the owned value."""
        if self._value is None:
            raise ValueError("UniquePtr is empty")
        return self._value

    def take(self) -> UniquePtr[T]:
        """Move ownership into a new handle, leaving this one empty."""
        moved = UniquePtr(self._value, self._deleter)
        self._value = None
        return moved

    def reset(self) -> None:
        """Dispose of the owned value, if any, and become empty."""
        value, self._value = self._value, None
        if value is not None and self._deleter is not None:
            self._deleter(value)

    def __bool__(self) -> bool:
        return self._value is not None

    def __enter__(self) -> UniquePtr[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.reset()

    def __repr__(self) -> str:
        return f"UniquePtr({self._value!r})"


class SharedPtr(Generic[T]):
    """Reference-counted owner; the value is disposed of when the last owner releases it."""

    __slots__ = ("_ctrl",)

    def __init__(self, value: T | None = None, deleter: Deleter | None = None) -> None:
        self._ctrl: ControlBlock[T] | None = (
            None if value is None else ControlBlock(value, deleter)
        )

    @classmethod
    def _from_block(cls, ctrl: ControlBlock[T]) -> SharedPtr[T]:
        ptr: SharedPtr[T] = cls()
        ctrl.strong_count += 1
        ptr._ctrl = ctrl
        return ptr

    def get(self) -> T:
        """Return the shared value."""
        if self._ctrl is None:
            raise ValueError("SharedPtr is empty")
        return self._ctrl.value  # type: ignore[return-value]

    def use_count(self) -> int:
        """Number of owners of the value, 0 when empty."""
        return self._ctrl.strong_count if self._ctrl is not None else 0

    def copy(self) -> SharedPtr[T]:
        """Return another owner of the same value."""
        if self._ctrl is None:
            return SharedPtr()
        return SharedPtr._from_block(self._ctrl)

    def take(self) -> SharedPtr[T]:
        """Move this ownership into a new handle, leaving this one empty."""
        moved: SharedPtr[T] = SharedPtr()
        moved._ctrl, self._ctrl = self._ctrl, None
        return moved

    def release(self) -> None:
        """Give up ownership; the last owner disposes of the value."""
        ctrl, self._ctrl = self._ctrl, None
        if ctrl is None:
            return
        ctrl.strong_count -= 1
        if ctrl.strong_count == 0:
            value, ctrl.value = ctrl.value, None
            if ctrl.deleter is not None:
                ctrl.deleter(value)

    def __bool__(self) -> bool:
        return self._ctrl is not None

    def __enter__(self) -> SharedPtr[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __copy__(self) -> SharedPtr[T]:
        return self.copy()

    def __repr__(self) -> str:
        if self._ctrl is None:
            return "SharedPtr()"
        return f"SharedPtr({self._ctrl.value!r}, use_count={self._ctrl.strong_count})"


class WeakPtr(Generic[T]):
    """Non-owning observer of a value managed by SharedPtr handles."""

    __slots__ = ("_ctrl",)

    def __init__(self, shared: SharedPtr[T] | None = None) -> None:
        self._ctrl: ControlBlock[T] | None = None
        if shared is not None:
            self._attach(shared._ctrl)

    def _attach(self, ctrl: ControlBlock[T] | None) -> None:
        if ctrl is not None:
            ctrl.weak_count += 1
        self._ctrl = ctrl

    def lock(self) -> SharedPtr[T]:
        """Return a new owner of the value, or an empty SharedPtr if it is gone."""
        if self._ctrl is not None and self._ctrl.strong_count > 0:
            return SharedPtr._from_block(self._ctrl)
        return SharedPtr()

    def copy(self) -> WeakPtr[T]:
        """Return another observer of the same value."""
        observer: WeakPtr[T] = WeakPtr()
        observer._attach(self._ctrl)
        return observer

    def take(self) -> WeakPtr[T]:
        """Move this observer into a new handle, leaving this one empty."""
        moved: WeakPtr[T] = WeakPtr()
        moved._ctrl, self._ctrl = self._ctrl, None
        return moved

    def release(self) -> None:
        """Stop observing the value."""
        ctrl, self._ctrl = self._ctrl, None
        if ctrl is not None:
            ctrl.weak_count -= 1

    def __copy__(self) -> WeakPtr[T]:
        return self.copy()

    def __repr__(self) -> str:
        alive = self._ctrl is not None and self._ctrl.strong_count > 0
        return f"WeakPtr(alive={alive})"