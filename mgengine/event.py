"""A simple multicast event."""

from __future__ import annotations

from typing import Any, Callable, List


class Event:
    """A list of callbacks invoked with a sender and extra arguments."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., Any]] = []

    def __iadd__(self, callback: Callable[..., Any]) -> Event:
        self._callbacks.append(callback)
        return self

    def __isub__(self, callback: Callable[..., Any]) -> Event:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            pass
        return self

    def __call__(self, sender: Any, *args: Any) -> None:
        for callback in tuple(self._callbacks):
            callback(sender, *args)

    def __len__(self) -> int:
        return len(self._callbacks)