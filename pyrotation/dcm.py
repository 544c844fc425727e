"""
A module for rotation matrices (Direction Cosine Matrices).

This is the standard representation of SO(3). There are 9 parameters and no singularities.
The elements are stored column-major, element (row, column) is elements[row + column * 3].
"""
import casadi as ca

from .util import unpack
from .vector3 import Vector3


class RotationMatrix:

    __slots__ = ('elements',)

    def __init__(self, elements):
        elements = list(elements)
        assert len(elements) == 9
        self.elements = elements

    def __eq__(self, other):
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        return all(bool(a == b) for a, b in zip(self.elements, other.elements))

    def __repr__(self):
        return 'RotationMatrix({!r})'.format(self.elements)

    def __len__(self):
        return 9

    @staticmethod
    def _index(key):
        if isinstance(key, tuple):
            row, column = key
            if not (0 <= row < 3 and 0 <= column < 3):
                raise IndexError('matrix index ({}, {}) out of range'.format(row, column))
            return row + column * 3
        if not 0 <= key < 9:
            raise IndexError('matrix index {} out of range'.format(key))
        return key

    def __getitem__(self, key):
        """
        m[i] reads the column-major store directly, m[row, column] reads by position.
        """
        return self.elements[self._index(key)]

    def __setitem__(self, key, value):
        self.elements[self._index(key)] = value

    def at(self, row, column):
        return self[row, column]

    @classmethod
    def identity(cls) -> 'RotationMatrix':
        return cls([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def rotation_x(cls, angle) -> 'RotationMatrix':
        c = ca.cos(angle)
        s = ca.sin(angle)
        return cls([
            1.0, 0.0, 0.0,
            0.0, c, s,
            0.0, -s, c])

    @classmethod
    def rotation_y(cls, angle) -> 'RotationMatrix':
        c = ca.cos(angle)
        s = ca.sin(angle)
        return cls([
            c, 0.0, -s,
            0.0, 1.0, 0.0,
            s, 0.0, c])

    @classmethod
    def rotation_z(cls, angle) -> 'RotationMatrix':
        c = ca.cos(angle)
        s = ca.sin(angle)
        return cls([
            c, s, 0.0,
            -s, c, 0.0,
            0.0, 0.0, 1.0])

    def __mul__(self, other):
        """
        Matrix product with another RotationMatrix or a Vector3.
        """
        if isinstance(other, RotationMatrix):
            return RotationMatrix.from_casadi(ca.mtimes(self.to_casadi(), other.to_casadi()))
        if isinstance(other, Vector3):
            return Vector3.from_casadi(ca.mtimes(self.to_casadi(), other.to_casadi()))
        return NotImplemented

    def to_casadi(self):
        # reshape fills column-major, same as the store
        return ca.reshape(ca.vertcat(*self.elements), 3, 3)

    @classmethod
    def from_casadi(cls, R) -> 'RotationMatrix':
        assert R.shape == (3, 3)
        return cls(unpack(R))
