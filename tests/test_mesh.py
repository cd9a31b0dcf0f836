import numpy as np
import pytest

from mgengine.gameobject import GameObject
from mgengine.material import Material
from mgengine.mesh import Mesh, Vertex
from mgengine.shader import Shader
from mgengine.vector import Vector2, Vector3


class NullShader(Shader):
    def _compile(self, vertex_source, fragment_source):
        pass

    def bind(self):
        pass

    def uniform_location(self, name):
        return -1

    def set_uniform_1f(self, location, value):
        pass

    def set_uniform_1i(self, location, value):
        pass

    def set_uniform_1ui(self, location, value):
        pass

    def _set_uniform_3f(self, location, v0, v1, v2):
        pass

    def set_uniform_4f(self, location, v0, v1, v2, v3):
        pass

    def set_uniform_mat4f(self, location, matrix):
        pass


@pytest.fixture(autouse=True)
def clean_scene():
    GameObject.clear_objects()
    for mesh in Mesh.registered():
        mesh.on_destroy()
    yield
    GameObject.clear_objects()
    for mesh in Mesh.registered():
        mesh.on_destroy()


def test_vertex_defaults_are_zero():
    vertex = Vertex()
    assert vertex.position == Vector3(0, 0, 0)
    assert vertex.normal == Vector3(0, 0, 0)
    assert vertex.uv == Vector2(0, 0)


def test_mesh_keeps_geometry():
    vertices = [Vertex(Vector3(1, 0, 0)), Vertex(Vector3(0, 1, 0)), Vertex(Vector3(0, 0, 1))]
    mesh = Mesh(vertices, [0, 1, 2])
    assert mesh.vertices == vertices
    assert mesh.indices == [0, 1, 2]


def test_custom_material_flag():
    assert Mesh().is_custom_material() is False
    material = Material(NullShader())
    mesh = Mesh(material=material)
    assert mesh.is_custom_material() is True
    assert mesh.material is material


def test_start_registers_and_destroy_unregisters():
    mesh = GameObject.instantiate(Mesh())
    assert Mesh.registered() == ()
    GameObject.run_start()
    assert Mesh.registered() == (mesh,)
    GameObject.destroy(mesh)
    assert Mesh.registered() == ()


def test_on_destroy_removes_only_that_mesh():
    first, second = Mesh(), Mesh()
    first.start()
    second.start()
    first.on_destroy()
    assert Mesh.registered() == (second,)


def test_child_meshes_are_unregistered_with_parent():
    parent = GameObject.instantiate(GameObject())
    child = parent.add_component(Mesh())
    GameObject.run_start()
    assert child in Mesh.registered()
    GameObject.destroy(parent)
    assert child not in Mesh.registered()


def test_model_matrix_follows_transform():
    mesh = Mesh()
    mesh.transform.set_local_position(Vector3(1.0, 2.0, 3.0))
    assert np.allclose(mesh.model_matrix[:3, 3], [1.0, 2.0, 3.0])
    assert np.allclose(mesh.model_matrix, mesh.transform.world_space_matrix)