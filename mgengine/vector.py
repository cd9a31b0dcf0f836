"""Two- and three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable

import numpy as np

from .floatutils import DEFAULT_EPSILON, is_equal_approximate


def _cast(value: float, like: float) -> float:
    """Keep integer components integral, truncating like a C conversion."""
    if isinstance(like, int) and not isinstance(like, bool):
        return int(value)
    return value


def _fmt(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


@dataclass(frozen=True)
class Vector2:
    """A two-component vector."""

    x: float = 0
    y: float = 0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1, 1)

    def is_equal_exact(self, other: Vector2) -> bool:
        return self.x == other.x and self.y == other.y

    def is_equal_approximate(self, other: Vector2, epsilon: float = DEFAULT_EPSILON) -> bool:
        return is_equal_approximate(self.x, other.x, epsilon) and is_equal_approximate(
            self.y, other.y, epsilon
        )

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(other.x + self.x, other.y + self.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector2(_cast(self.x * factor, self.x), _cast(self.y * factor, self.y))

    def __truediv__(self, factor: float) -> Vector2:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector2(_cast(self.x / factor, self.x), _cast(self.y / factor, self.y))

    def dot(self, other: Vector2) -> float:
        return float(other.x * self.x + other.y * self.y)

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalized(self) -> Vector2:
        return self / self.magnitude()

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float = 0
    y: float = 0
    z: float = 0

    @classmethod
    def from_array(cls, values: Iterable[float]) -> Vector3:
        """Build a vector from the first three items of a sequence or array."""
        x, y, z, *_ = (float(v) for v in values)
        return cls(x, y, z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def is_equal_exact(self, other: Vector3) -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def is_equal_approximate(self, other: Vector3, epsilon: float = DEFAULT_EPSILON) -> bool:
        return all(
            is_equal_approximate(float(a), float(b), epsilon)
            for a, b in ((self.x, other.x), (self.y, other.y), (self.z, other.z))
        )

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(other.x + self.x, other.y + self.y, other.z + self.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector3(
            _cast(self.x * factor, self.x),
            _cast(self.y * factor, self.y),
            _cast(self.z * factor, self.z),
        )

    def __truediv__(self, factor: float) -> Vector3:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector3(
            _cast(self.x / factor, self.x),
            _cast(self.y / factor, self.y),
            _cast(self.z / factor, self.z),
        )

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        return float(other.x * self.x + other.y * self.y + other.z * self.z)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalized(self) -> Vector3:
        return self / self.magnitude()

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"