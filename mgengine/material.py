"""Materials: a shader together with named uniform values."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

from .log import SC_ERROR_ON, Level, log
from .shader import Shader
from .vector import Vector3

_UINT_MASK = 0xFFFFFFFF


class MaterialProperty:
    """A named uniform value that a material sends to its shader."""

    def __init__(self, shader: Shader, name: str) -> None:
        self.name = name
        self.location = -1
        self.value: Optional[Union[int, Tuple[float, ...]]] = None
        self.dirty = False
        self._sender: Optional[Callable[[Shader], None]] = None
        self.update_shader_location(shader)

    def update_shader_location(self, shader: Shader) -> None:
        self.location = shader.uniform_location(self.name)

    def set_int(self, value: int) -> None:
        self.value = int(value)
        self._sender = lambda shader: shader.set_uniform_1i(self.location, self.value)
        self.dirty = True

    def set_uint(self, value: int) -> None:
        self.value = int(value) & _UINT_MASK
        self._sender = lambda shader: shader.set_uniform_1ui(self.location, self.value)
        self.dirty = True

    def set_float(self, value: float) -> None:
        self.value = (float(value),)
        self._sender = lambda shader: shader.set_uniform_1f(self.location, self.value[0])
        self.dirty = True

    def set_vec3(self, value: Vector3) -> None:
        self.value = (float(value.x), float(value.y), float(value.z))
        self._sender = lambda shader: shader.set_uniform_3f(self.location, *self.value)
        self.dirty = True

    def send_to_shader(self, shader: Shader) -> None:
        """Upload the value, skipping properties without a value or shader location."""
        if self._sender is None:
            if SC_ERROR_ON:
                log(Level.ERROR, "Material property '", self.name, "' has no value set", engine=True)
            return
        if self.location == -1:
            log(
                Level.WARNING,
                "Material property '",
                self.name,
                "' has no location in the current shader",
                engine=True,
            )
            return
        if self.dirty:
            self._sender(shader)


class Material:
    """A shader and the properties to upload to it before drawing."""

    def __init__(self, shader: Shader) -> None:
        self._properties: List[MaterialProperty] = []
        self._shader = shader

    @property
    def shader(self) -> Shader:
        return self._shader

    @shader.setter
    def shader(self, value: Shader) -> None:
        self._shader = value
        for prop in self._properties:
            prop.update_shader_location(value)

    def remove_property(self, name: str) -> bool:
        for index, prop in enumerate(self._properties):
            if prop.name == name:
                del self._properties[index]
                return True
        return False

    def has_property(self, name: str) -> bool:
        return any(prop.name == name for prop in self._properties)

    def get_property(self, name: str) -> MaterialProperty:
        """Return the property called ``name``, creating it if it does not exist."""
        for prop in self._properties:
            if prop.name == name:
                return prop
        prop = MaterialProperty(self._shader, name)
        self._properties.append(prop)
        return prop

    def send_to_shader(self) -> None:
        for prop in self._properties:
            prop.send_to_shader(self._shader)