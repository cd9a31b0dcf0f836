"""Position, rotation and scale of a game object within its hierarchy."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .matrixutils import DecomposedMatrix, decompose_matrix, get_rotation
from .quaternion import Quaternion
from .vector import Vector3


def _translation_matrix(position: Vector3) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = position.to_array()
    return matrix


def _scale_matrix(scale: Vector3) -> np.ndarray:
    return np.diag([float(scale.x), float(scale.y), float(scale.z), 1.0])


class Transform:
    """Local and world-space placement of a game object."""

    def __init__(self, game_object: Any) -> None:
        self._game_object = game_object
        self._world = np.identity(4)

        self._local_position = Vector3(0.0, 0.0, 0.0)
        self._local_rotation = Quaternion.identity()
        self._local_scale = Vector3(1.0, 1.0, 1.0)

        self._global_position = Vector3(0.0, 0.0, 0.0)
        self._global_rotation = Quaternion.identity()
        self._global_scale = Vector3(1.0, 1.0, 1.0)

    def _parent_matrix(self) -> np.ndarray:
        parent = self._game_object.parent
        if parent is None:
            return np.identity(4)
        return parent.transform.world_space_matrix

    def _local_model_matrix(self) -> np.ndarray:
        return (
            _translation_matrix(self._local_position)
            @ self._local_rotation.rotation_matrix()
            @ _scale_matrix(self._local_scale)
        )

    def _set_locals(self, decomposed: DecomposedMatrix) -> None:
        self._local_position = decomposed.translation
        self._local_scale = decomposed.scale
        self._local_rotation = decomposed.rotation

    def update_matrix(self, local_matrix=None, update_local_values: bool = True) -> None:
        """Recompute the world matrix and propagate it to the children.

        Without ``local_matrix`` the local position, rotation and scale are used.
        With it, the local values are taken from the matrix when
        ``update_local_values`` is true.
        """
        if local_matrix is None:
            local_matrix = self._local_model_matrix()
            update_local_values = False
        local_matrix = np.asarray(local_matrix, dtype=float)

        if update_local_values:
            self._set_locals(decompose_matrix(local_matrix))

        self._world = self._parent_matrix() @ local_matrix

        decomposed = decompose_matrix(self._world)
        self._global_position = decomposed.translation
        self._global_scale = decomposed.scale
        self._global_rotation = decomposed.rotation

        for child in self._game_object.children:
            child.transform.update_matrix()

    def set_world_space_matrix(self, matrix) -> None:
        local_matrix = np.linalg.inv(self._parent_matrix()) @ np.asarray(matrix, dtype=float)
        self._set_locals(decompose_matrix(local_matrix))
        self.update_matrix()

    @property
    def world_space_matrix(self) -> np.ndarray:
        return self._world.copy()

    def set_position(self, position: Vector3) -> None:
        """Place the object at a world-space position."""
        if self._game_object.parent is not None:
            inverse = np.linalg.inv(self._parent_matrix())
            point = np.append(position.to_array(), 1.0)
            self._local_position = Vector3.from_array(inverse @ point)
        else:
            self._local_position = position
        self.update_matrix()

    def set_rotation(self, rotation: Quaternion) -> None:
        """Give the object a world-space rotation."""
        if self._game_object.parent is not None:
            inverse = np.linalg.inv(self._parent_matrix())
            self._local_rotation = get_rotation(inverse @ rotation.rotation_matrix())
        else:
            self._local_rotation = rotation
        self.update_matrix()

    def set_local_position(self, position: Vector3) -> None:
        self._local_position = position
        self.update_matrix()

    def set_local_scale(self, scale: Vector3) -> None:
        self._local_scale = scale
        self.update_matrix()

    def set_local_rotation(self, rotation: Quaternion) -> None:
        self._local_rotation = rotation
        self.update_matrix()

    @property
    def forward(self) -> Vector3:
        return self._global_rotation.forward()

    @property
    def up(self) -> Vector3:
        return self._global_rotation.up()

    @property
    def position(self) -> Vector3:
        return self._global_position

    @property
    def scale(self) -> Vector3:
        return self._global_scale

    @property
    def rotation(self) -> Quaternion:
        return self._global_rotation

    @property
    def local_position(self) -> Vector3:
        return self._local_position

    @property
    def local_scale(self) -> Vector3:
        return self._local_scale

    @property
    def local_rotation(self) -> Quaternion:
        return self._local_rotation

    @property
    def game_object(self) -> Optional[Any]:
        return self._game_object

    def __str__(self) -> str:
        return (
            f"Transform[Position: {self._global_position}, "
            f"Rotation: {self._global_rotation.to_euler()}, "
            f"Scale: {self._global_scale}]"
        )