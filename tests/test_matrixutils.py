import numpy as np
import pytest

from mgengine.matrixutils import (
    decompose_matrix,
    get_rotation,
    get_scale,
    get_translation,
)
from mgengine.quaternion import Quaternion
from mgengine.vector import Vector3


def _trs(translation, rotation, scale):
    t = np.identity(4)
    t[:3, 3] = translation
    s = np.diag([*scale, 1.0])
    return t @ rotation.rotation_matrix() @ s


ROTATION = Quaternion.from_euler(Vector3(0.3, 0.2, 0.1))
MATRIX = _trs((1.0, 2.0, 3.0), ROTATION, (2.0, 3.0, 4.0))


def test_get_translation():
    t = get_translation(MATRIX)
    assert (t.x, t.y, t.z) == pytest.approx((1.0, 2.0, 3.0))


def test_get_scale():
    s = get_scale(MATRIX)
    assert (s.x, s.y, s.z) == pytest.approx((2.0, 3.0, 4.0))


def test_get_rotation_with_and_without_scale():
    explicit = get_rotation(MATRIX, Vector3(2.0, 3.0, 4.0))
    derived = get_rotation(MATRIX)
    assert np.allclose(explicit.rotation_matrix(), ROTATION.rotation_matrix())
    assert np.allclose(derived.rotation_matrix(), ROTATION.rotation_matrix())


def test_decompose_then_rebuild():
    d = decompose_matrix(MATRIX)
    rebuilt = _trs(d.translation.to_array(), d.rotation, d.scale.to_array())
    assert np.allclose(rebuilt, MATRIX)


def test_decompose_identity():
    d = decompose_matrix(np.identity(4))
    assert (d.translation.x, d.translation.y, d.translation.z) == pytest.approx((0.0, 0.0, 0.0))
    assert (d.scale.x, d.scale.y, d.scale.z) == pytest.approx((1.0, 1.0, 1.0))
    assert np.allclose(d.rotation.rotation_matrix(), np.identity(4))