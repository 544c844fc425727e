import casadi as ca
import pytest

from pyrotation import EulerAngle, Vector3


def test_casadi():
    v = Vector3(2, 3, 5)
    assert v.to_casadi().shape == (3, 1)
    assert Vector3.from_casadi(ca.DM([2, 3, 5])) == v
    with pytest.raises(AssertionError):
        Vector3.from_casadi(ca.DM([1, 2]))


def test_immutable():
    v = Vector3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 4


def test_no_tuple_arithmetic():
    a = Vector3(1, 2, 3)
    with pytest.raises(TypeError):
        a + Vector3(4, 5, 6)
    with pytest.raises(TypeError):
        a * 2
    with pytest.raises(TypeError):
        2 * a
    e = EulerAngle(0.1, 0.2, 0.3)
    with pytest.raises(TypeError):
        e + e
    with pytest.raises(TypeError):
        e * 2
