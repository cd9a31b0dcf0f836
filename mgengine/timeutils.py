"""Frame timing."""

from __future__ import annotations

import time
from typing import ClassVar, Optional


class Clock:
    """Process-wide clock tracking elapsed time and the last frame's duration."""

    _dt: ClassVar[float] = 0.0
    _last_time: ClassVar[Optional[float]] = None
    _start_time: ClassVar[float] = time.perf_counter()

    @classmethod
    def elapsed_time(cls) -> float:
        """Seconds since the clock started."""
        return time.perf_counter() - cls._start_time

    @classmethod
    def delta_time(cls) -> float:
        """Seconds between the two most recent updates."""
        return cls._dt

    @classmethod
    def update(cls) -> None:
        """Mark the start of a new frame."""
        now = time.perf_counter()
        if cls._last_time is not None:
            cls._dt = now - cls._last_time
        cls._last_time = now

    @classmethod
    def reset(cls) -> None:
        """Restart the clock and forget the previous frame."""
        cls._start_time = time.perf_counter()
        cls._last_time = None
        cls._dt = 0.0