"""A value wrapper that remembers whether it was changed."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Dirty(Generic[T]):
    """Holds a value and a flag that is raised whenever the value is set."""

    def __init__(self, value: Optional[T] = None) -> None:
        self._value = value
        self.dirty = False

    def set(self, value: T) -> None:
        self._value = value
        self.dirty = True

    def get(self) -> Optional[T]:
        return self._value