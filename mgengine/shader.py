"""Backend-independent shader programs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np

from .files import load_all_text
from .vector import Vector3


class ShaderError(RuntimeError):
    """Raised when a shader program cannot be compiled or linked."""


class Shader(ABC):
    """A shader program that is loaded from source files and receives uniforms."""

    def __init__(self) -> None:
        self.good = False
        # When false, objects are drawn without model transformations (useful for 2D).
        self.using_model_matrices = True

    def load(self, vertex_path, fragment_path) -> None:
        """Read both sources and build the program; raise :class:`ShaderError` on failure."""
        vertex_source = load_all_text(vertex_path)
        fragment_source = load_all_text(fragment_path)
        self.good = False
        self._compile(vertex_source, fragment_source)
        self.good = True

    @abstractmethod
    def _compile(self, vertex_source: str, fragment_source: str) -> None:
        """Build the program from source text, raising ShaderError on failure."""

    @abstractmethod
    def bind(self) -> None:
        """Make this program the current one."""

    @abstractmethod
    def uniform_location(self, name: str) -> int:
        """Return the location of a uniform, or -1 if the program has none by that name."""

    @abstractmethod
    def set_uniform_1f(self, location: int, value: float) -> None: ...

    @abstractmethod
    def set_uniform_1i(self, location: int, value: int) -> None: ...

    @abstractmethod
    def set_uniform_1ui(self, location: int, value: int) -> None: ...

    def set_uniform_3f(
        self,
        location: int,
        v0: Union[float, Vector3],
        v1: Optional[float] = None,
        v2: Optional[float] = None,
    ) -> None:
        """Set a vec3 uniform from three numbers or from one :class:`Vector3`."""
        if isinstance(v0, Vector3):
            if v1 is not None or v2 is not None:
                raise TypeError("pass either a Vector3 or three components")
            self._set_uniform_3f(location, v0.x, v0.y, v0.z)
            return
        if v1 is None or v2 is None:
            raise TypeError("set_uniform_3f needs three components")
        self._set_uniform_3f(location, v0, v1, v2)

    @abstractmethod
    def _set_uniform_3f(self, location: int, v0: float, v1: float, v2: float) -> None: ...

    @abstractmethod
    def set_uniform_4f(self, location: int, v0: float, v1: float, v2: float, v3: float) -> None: ...

    @abstractmethod
    def set_uniform_mat4f(self, location: int, matrix: np.ndarray) -> None: ...