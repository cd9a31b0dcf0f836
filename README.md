# mgengine

Building blocks for a small 3D game engine, written on top of numpy and Pillow.

## Contents

- **Math.** `mgengine.vector` has `Vector2` and `Vector3`. These are immutable, support `+`, `-`, `*` and `/`, and provide `dot`, `cross`, `magnitude`, `normalized` and both exact and approximate comparison. `mgengine.quaternion.Quaternion` has `from_euler`, `from_matrix`, `to_euler`, `rotate`, `forward`, `up`, `right`, `rotated_around` and `rotation_matrix`. `mgengine.matrixutils` splits a 4x4 matrix into translation, rotation and scale through `decompose_matrix`, `get_translation`, `get_rotation` and `get_scale`. `mgengine.floatutils` provides `sign` and `is_equal_approximate`.
- **Scene graph.** `mgengine.gameobject.GameObject` handles instantiation, parenting with `add_component`, `set_parent`, `remove_parent` and `remove_component`, and destruction. `GameObject.run_start()` and `GameObject.run_update()` walk every registered object and its children, and then fire the `late_start_event` and `late_update_event`. `hierarchy()` and `print_hierarchy()` list the tree. Each object owns an `mgengine.transform.Transform`, which keeps its local and world-space position, rotation and scale in step with its parent.
- **Key codes.** `mgengine.inputstructs` defines `KeyboardKeys`, `MouseAxis`, `InputDevices` and `CursorModes`. `mgengine.glfwkeys.glfw_key` turns a `KeyboardKeys` value into the matching GLFW key code, and raises `KeyError` for a key that has no code, such as `UNKNOWN`.
- **Rendering data.** `mgengine.shader.Shader` and `mgengine.texture.Texture` are abstract base classes for a graphics backend to fill in. `Texture.load_from_file` uses Pillow to read an image. `mgengine.material` has `Material`, which is a shader plus named `MaterialProperty` values (int, uint, float or vec3) that it uploads through `send_to_shader`. `mgengine.mesh` has `Vertex` and `Mesh`. A mesh registers itself for drawing when it starts and unregisters when it is destroyed, and `Mesh.registered()` returns the meshes currently registered.
- **Utilities.**
  - `mgengine.compression.decompress_gzip` inflates zlib streams and raises `DecompressionError` if a stream is corrupt or truncated.
  - `mgengine.files` has `load_all_text`, `load_all_lines` and `BinaryReader`, which reads little-endian integers and floats.
  - `mgengine.event.Event` is a multicast callback list.
  - `mgengine.dirty.Dirty` wraps a value and tracks whether it has changed.
  - `mgengine.stringutils.split` splits a string.
  - `mgengine.timeutils.Clock` measures frame times.
  - `mgengine.log` provides coloured console logging with `log` and `Level`. Its `fatal` function raises `EngineFatalError`.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Example: scene graph and transforms

```python
from mgengine.gameobject import GameObject
from mgengine.quaternion import Quaternion
from mgengine.vector import Vector3

parent = GameObject.instantiate(GameObject())
child = parent.add_component(GameObject())

parent.transform.set_local_scale(Vector3(5.0, 3.0, 2.0))
parent.transform.set_position(Vector3(0.0, 0.0, 2.0))
parent.transform.set_local_rotation(Quaternion.from_euler(Vector3(0.0, 1.0, 0.0)))
child.transform.set_local_position(Vector3(5.0, 0.0, 0.0))

print(child.transform)          # world-space position, rotation and scale
print(GameObject.hierarchy())   # ['GameObject', '\tGameObject']
```

## Example: lifecycle hooks

```python
from mgengine.gameobject import GameObject

class Spinner(GameObject):
    def start(self):
        self.frames = 0

    def update(self):
        self.frames += 1

spinner = GameObject.instantiate(Spinner())
GameObject.run_start()
GameObject.run_update()
GameObject.run_update()
assert spinner.frames == 2
```

## Example: events and key codes

```python
from mgengine.event import Event
from mgengine.glfwkeys import glfw_key
from mgengine.inputstructs import KeyboardKeys

on_hit = Event()
on_hit += lambda sender, damage: print(sender, "took", damage)
on_hit("player", 10)

glfw_key(KeyboardKeys.KEY_W)   # 87
```

## What the package does not do

The package has no window, no graphics backend and no main loop. `Shader` and `Texture` are abstract, so drawing anything requires subclasses for a real graphics API. The package does not render meshes, does not create framebuffers, and has no camera object. It defines key codes and cursor modes but does not read the keyboard or mouse, and it has no registry of input mappings. It also provides no command-line program.