import pytest

from mgengine.floatutils import is_equal_approximate, sign


@pytest.mark.parametrize("value", [3, -7, 2.5, -0.125, 1e9, -1e-9])
def test_sign_times_magnitude_restores_value(value):
    assert sign(value) * abs(value) == value


def test_sign_of_zero():
    assert sign(0) == 0
    assert sign(0.0) == 0


def test_sign_opposite_for_negation():
    assert sign(4.2) == -sign(-4.2)


def test_equal_values_are_approximately_equal():
    assert is_equal_approximate(1000.0, 1000.0)


def test_tiny_relative_difference_is_equal():
    assert is_equal_approximate(1000.0, 1000.000001)


def test_large_relative_difference_is_not_equal():
    assert not is_equal_approximate(1000.0, 1000.1)


def test_zero_against_nonzero_is_not_equal():
    assert not is_equal_approximate(0.0, 1e-9)


def test_custom_epsilon_widens_tolerance():
    assert not is_equal_approximate(100.0, 101.0)
    assert is_equal_approximate(100.0, 101.0, epsilon=0.1)