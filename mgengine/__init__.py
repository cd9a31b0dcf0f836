"""Core of a small 3D game engine: vector and quaternion math, a scene graph, key codes, materials, textures and meshes."""

__version__ = "0.1.0"