"""Decomposition of 4x4 transformation matrices."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .quaternion import Quaternion
from .vector import Vector3


@dataclass(frozen=True)
class DecomposedMatrix:
    """Translation, rotation and scale extracted from a transformation matrix."""

    translation: Vector3
    rotation: Quaternion
    scale: Vector3


def get_translation(matrix) -> Vector3:
    m = np.asarray(matrix, dtype=float)
    return Vector3.from_array(m[:3, 3])


def get_scale(matrix) -> Vector3:
    m = np.asarray(matrix, dtype=float)
    return Vector3.from_array(np.linalg.norm(m[:3, :3], axis=0))


def get_rotation(matrix, scale: Vector3 | None = None) -> Quaternion:
    """Return the rotation part of ``matrix``, dividing out ``scale`` (computed if omitted)."""
    m = np.asarray(matrix, dtype=float)
    if scale is None:
        scale = get_scale(m)
    rotation = np.identity(4)
    rotation[:3, :3] = m[:3, :3] / scale.to_array()
    return Quaternion.from_matrix(rotation)


def decompose_matrix(matrix) -> DecomposedMatrix:
    m = np.asarray(matrix, dtype=float)
    translation = get_translation(m)
    scale = get_scale(m)
    rotation = get_rotation(m, scale)
    return DecomposedMatrix(translation=translation, rotation=rotation, scale=scale)