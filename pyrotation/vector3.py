"""
A module for 3 component vectors.
"""
from collections import namedtuple

from .util import column, unpack


class Vector3(namedtuple('Vector3', ['x', 'y', 'z'])):
    """
    Immutable 3 vector. Components may be numbers or casadi scalars.
    There is no vector arithmetic, the tuple + and * are disabled.
    """

    __slots__ = ()

    def __add__(self, other):
        return NotImplemented

    def __mul__(self, other):
        return NotImplemented

    def __rmul__(self, other):
        return NotImplemented

    def to_casadi(self):
        return column(self.x, self.y, self.z)

    @classmethod
    def from_casadi(cls, v) -> 'Vector3':
        assert v.shape == (3, 1)
        return cls(*unpack(v))
