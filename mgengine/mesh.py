"""Triangle meshes placed in the scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, List, Optional, Tuple

import numpy as np

from .gameobject import GameObject
from .material import Material
from .vector import Vector2, Vector3


@dataclass
class Vertex:
    """A mesh vertex with position, normal and texture coordinates."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    uv: Vector2 = field(default_factory=Vector2)


class Mesh(GameObject):
    """Vertices and triangle indices, drawn with an optional custom material.

    A mesh is registered for drawing when it starts and unregistered when
    it is destroyed.
    """

    _meshes: ClassVar[List[Mesh]] = []

    def __init__(
        self,
        vertices: Iterable[Vertex] = (),
        indices: Iterable[int] = (),
        material: Optional[Material] = None,
    ) -> None:
        super().__init__()
        self.vertices: List[Vertex] = list(vertices)
        self.indices: List[int] = list(indices)
        self.material = material

    @classmethod
    def registered(cls) -> Tuple[Mesh, ...]:
        """Return the meshes currently registered for drawing."""
        return tuple(Mesh._meshes)

    def is_custom_material(self) -> bool:
        return self.material is not None

    @property
    def model_matrix(self) -> np.ndarray:
        return self.transform.world_space_matrix

    def start(self) -> None:
        Mesh._meshes.append(self)

    def on_destroy(self) -> None:
        for index, mesh in enumerate(Mesh._meshes):
            if mesh is self:
                del Mesh._meshes[index]
                break