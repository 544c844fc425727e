import math

import casadi as ca
import pytest

from pyrotation import RotationMatrix, Vector3

tol = 1e-9  # tolerance


def close(a, b, tol=tol):
    return all(abs(float(ai) - float(bi)) < tol for ai, bi in zip(a, b))


def test_rotation_x_layout():
    m = RotationMatrix.rotation_x(0.5)
    c = math.cos(0.5)
    s = math.sin(0.5)
    assert close(m.elements, [1, 0, 0, 0, c, s, 0, -s, c])
    assert abs(float(m.at(2, 1)) - s) < tol
    assert abs(float(m.at(1, 2)) + s) < tol


def test_right_handed():
    m = RotationMatrix.rotation_z(math.pi / 2)
    assert close(m * Vector3(1, 0, 0), [0, 1, 0])
    m = RotationMatrix.rotation_x(math.pi / 2)
    assert close(m * Vector3(0, 1, 0), [0, 0, 1])
    m = RotationMatrix.rotation_y(math.pi / 2)
    assert close(m * Vector3(0, 0, 1), [1, 0, 0])


def test_indexing():
    m = RotationMatrix(range(9))
    assert m[5] == 5
    assert m[2, 1] == 5
    assert m.at(0, 2) == 6
    m[1, 2] = 42
    assert m[7] == 42
    m[0] = -1
    assert m.at(0, 0) == -1
    with pytest.raises(IndexError):
        m[9]
    with pytest.raises(IndexError):
        m.at(3, 0)


def test_ctor():
    RotationMatrix.identity()
    with pytest.raises(AssertionError):
        RotationMatrix([1, 2, 3])


def test_product():
    a = RotationMatrix.rotation_x(0.4)
    b = RotationMatrix.rotation_z(-1.1)
    v = Vector3(2, 3, 5)
    assert close((a * b) * v, a * (b * v))
    assert close((RotationMatrix.identity() * a).elements, a.elements)


def test_product_column_major():
    a = RotationMatrix(range(1, 10))
    b = RotationMatrix(range(10, 19))
    expected = ca.mtimes(ca.reshape(ca.DM(list(range(1, 10))), 3, 3),
                         ca.reshape(ca.DM(list(range(10, 19))), 3, 3))
    assert ca.norm_fro((a * b).to_casadi() - expected) < tol
    assert close(a * Vector3(1, 0, 0), [1, 2, 3])
    assert close(a * Vector3(0, 0, 1), [7, 8, 9])


def test_casadi():
    m = RotationMatrix.rotation_y(0.7)
    assert m.to_casadi().shape == (3, 3)
    assert close(RotationMatrix.from_casadi(m.to_casadi()).elements, m.elements)
