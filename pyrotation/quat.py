"""
A module for quaternions (Euler parameters)

Components are stored scalar last, (x, y, z, w).
"""

import casadi as ca

from .util import column, unpack
from .vector3 import Vector3


class Quaternion:

    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x, y, z, w):
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)
        object.__setattr__(self, 'z', z)
        object.__setattr__(self, 'w', w)

    def __setattr__(self, name, value):
        raise AttributeError('Quaternion is immutable')

    def __delattr__(self, name):
        raise AttributeError('Quaternion is immutable')

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return all(bool(a == b) for a, b in zip(self, other))

    def __repr__(self):
        return 'Quaternion(x={!r}, y={!r}, z={!r}, w={!r})'.format(*self)

    @classmethod
    def identity(cls) -> 'Quaternion':
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def rotation_x(cls, angle) -> 'Quaternion':
        """
        Rotation about the x axis.
        :param angle: The angle [rad].
        :return: The unit quaternion.
        """
        return cls(ca.sin(0.5 * angle), 0.0, 0.0, ca.cos(0.5 * angle))

    @classmethod
    def rotation_y(cls, angle) -> 'Quaternion':
        """
        Rotation about the y axis.
        :param angle: The angle [rad].
        :return: The unit quaternion.
        """
        return cls(0.0, ca.sin(0.5 * angle), 0.0, ca.cos(0.5 * angle))

    @classmethod
    def rotation_z(cls, angle) -> 'Quaternion':
        """
        Rotation about the z axis.
        :param angle: The angle [rad].
        :return: The unit quaternion.
        """
        return cls(0.0, 0.0, ca.sin(0.5 * angle), ca.cos(0.5 * angle))

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """
        The product of two quaternions using the hamilton
        convention, so that (a*b).rotate(v) = a.rotate(b.rotate(v)).
        :param other: The second quaternion.
        :return: The quaternion product.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        x1, y1, z1, w1 = self
        x2, y2, z2, w2 = other
        return Quaternion(
            w1 * x2 - z1 * y2 + y1 * z2 + x1 * w2,
            z1 * x2 + w1 * y2 - x1 * z2 + y1 * w2,
            -y1 * x2 + x1 * y2 + w1 * z2 + z1 * w2,
            -x1 * x2 - y1 * y2 - z1 * z2 + w1 * w2)

    def conjugate(self) -> 'Quaternion':
        """
        The conjugate, which is the inverse rotation for a unit quaternion.
        """
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def norm(self):
        return ca.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)

    def rotate(self, v: Vector3) -> Vector3:
        """
        Rotates a vector, q * (v, 0) * q^-1. Only a rotation for unit quaternions.
        :param v: The vector.
        :return: The rotated vector.
        """
        p = self * Quaternion(v[0], v[1], v[2], 0.0) * self.conjugate()
        return Vector3(p.x, p.y, p.z)

    def to_casadi(self):
        return column(self.x, self.y, self.z, self.w)

    @classmethod
    def from_casadi(cls, q) -> 'Quaternion':
        assert q.shape == (4, 1)
        return cls(*unpack(q))


def conjugate(q: Quaternion) -> Quaternion:
    return q.conjugate()
