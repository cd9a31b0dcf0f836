"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .vector import Vector3

# Machine epsilon of single-precision floats, used for singularity checks.
_FLOAT_EPSILON = 1.1920929e-07


def _near_zero(a: float, b: float) -> bool:
    return abs(a) <= _FLOAT_EPSILON and abs(b) <= _FLOAT_EPSILON


@dataclass(frozen=True)
class Quaternion:
    """A quaternion stored as (w, x, y, z)."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls()

    @classmethod
    def from_euler(cls, angles: Vector3) -> Quaternion:
        """Build a rotation from (pitch, yaw, roll) angles in radians."""
        cx, cy, cz = (math.cos(a * 0.5) for a in (angles.x, angles.y, angles.z))
        sx, sy, sz = (math.sin(a * 0.5) for a in (angles.x, angles.y, angles.z))
        return cls(
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        )

    @classmethod
    def from_matrix(cls, matrix) -> Quaternion:
        """Extract the rotation from a 3x3 or 4x4 row-major rotation matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape not in ((3, 3), (4, 4)):
            raise ValueError(f"expected a 3x3 or 4x4 matrix, got shape {m.shape}")

        def at(col: int, row: int) -> float:
            return float(m[row, col])

        candidates = [
            at(0, 0) + at(1, 1) + at(2, 2),
            at(0, 0) - at(1, 1) - at(2, 2),
            at(1, 1) - at(0, 0) - at(2, 2),
            at(2, 2) - at(0, 0) - at(1, 1),
        ]
        biggest_index = 0
        for index in (1, 2, 3):
            if candidates[index] > candidates[biggest_index]:
                biggest_index = index

        biggest = math.sqrt(candidates[biggest_index] + 1.0) * 0.5
        mult = 0.25 / biggest

        if biggest_index == 0:
            return cls(
                biggest,
                (at(1, 2) - at(2, 1)) * mult,
                (at(2, 0) - at(0, 2)) * mult,
                (at(0, 1) - at(1, 0)) * mult,
            )
        if biggest_index == 1:
            return cls(
                (at(1, 2) - at(2, 1)) * mult,
                biggest,
                (at(0, 1) + at(1, 0)) * mult,
                (at(2, 0) + at(0, 2)) * mult,
            )
        if biggest_index == 2:
            return cls(
                (at(2, 0) - at(0, 2)) * mult,
                (at(0, 1) + at(1, 0)) * mult,
                biggest,
                (at(1, 2) + at(2, 1)) * mult,
            )
        return cls(
            (at(0, 1) - at(1, 0)) * mult,
            (at(2, 0) + at(0, 2)) * mult,
            (at(1, 2) + at(2, 1)) * mult,
            biggest,
        )

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            p, q = self, other
            return Quaternion(
                p.w * q.w - p.x * q.x - p.y * q.y - p.z * q.z,
                p.w * q.x + p.x * q.w + p.y * q.z - p.z * q.y,
                p.w * q.y + p.y * q.w + p.z * q.x - p.x * q.z,
                p.w * q.z + p.z * q.w + p.x * q.y - p.y * q.x,
            )
        if isinstance(other, Vector3):
            return self.rotate(other)
        return NotImplemented

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        norm2 = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        c = self.conjugate()
        return Quaternion(c.w / norm2, c.x / norm2, c.y / norm2, c.z / norm2)

    def rotate(self, vector: Vector3) -> Vector3:
        """Rotate a vector by this quaternion."""
        axis = Vector3(float(self.x), float(self.y), float(self.z))
        uv = axis.cross(vector)
        uuv = axis.cross(uv)
        return vector + (uv * float(self.w) + uuv) * 2.0

    def forward(self) -> Vector3:
        return self.inverse().rotate(Vector3(0.0, 0.0, 1.0))

    def up(self) -> Vector3:
        return self.inverse().rotate(Vector3(0.0, 1.0, 0.0))

    def right(self) -> Vector3:
        return self.inverse().rotate(Vector3(1.0, 0.0, 0.0))

    def to_euler(self) -> Vector3:
        """Return (pitch, yaw, roll) in radians."""
        w, x, y, z = self.w, self.x, self.y, self.z

        pitch_y = 2.0 * (y * z + w * x)
        pitch_x = w * w - x * x - y * y + z * z
        if _near_zero(pitch_x, pitch_y):
            pitch = 2.0 * math.atan2(x, w)
        else:
            pitch = math.atan2(pitch_y, pitch_x)

        yaw = math.asin(max(-1.0, min(1.0, -2.0 * (x * z - w * y))))

        roll_y = 2.0 * (x * y + w * z)
        roll_x = w * w + x * x - y * y - z * z
        roll = 0.0 if _near_zero(roll_x, roll_y) else math.atan2(roll_y, roll_x)

        return Vector3(pitch, yaw, roll)

    def rotated_around(self, axis: Vector3, angle: float) -> Quaternion:
        return self * Quaternion.from_euler(axis * angle)

    def normalized(self, tolerance: float = 0.0000001) -> Quaternion:
        """Scale to unit length when the squared length exceeds 1 by more than ``tolerance``."""
        mag2 = self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        if mag2 - 1.0 > tolerance:
            mag = math.sqrt(mag2)
            return Quaternion(self.w / mag, self.x / mag, self.y / mag, self.z / mag)
        return self

    def rotation_matrix(self) -> np.ndarray:
        """Return the 4x4 row-major rotation matrix."""
        w, x, y, z = self.w, self.x, self.y, self.z
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return np.array(
            [
                [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0],
                [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0],
                [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=float,
        )