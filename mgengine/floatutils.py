"""Small helpers for comparing and classifying numbers."""

from __future__ import annotations

DEFAULT_EPSILON = 0.00001


def sign(value: float) -> int:
    """Return 1, -1 or 0 depending on the sign of ``value``."""
    return int(value > 0) - int(value < 0)


def is_equal_approximate(a: float, b: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Compare two numbers relative to the smaller of their magnitudes."""
    smaller = min(abs(a), abs(b))
    return abs(a - b) <= smaller * epsilon