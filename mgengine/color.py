"""RGBA colour values."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .vector import Vector3


@dataclass
class Color:
    """A colour with red, green, blue and alpha channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_vector(cls, vector: Vector3) -> Color:
        return cls(vector.x, vector.y, vector.z, 1.0)

    def to_vec3(self) -> Vector3:
        """Return the colour with alpha premultiplied into the RGB channels."""
        return Vector3(self.r * self.a, self.g * self.a, self.b * self.a)

    def to_array(self) -> np.ndarray:
        return self.to_vec3().to_array()