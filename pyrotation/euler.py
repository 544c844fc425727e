"""
A module for Euler angles.

This is a representation of SO(3) with 3 parameters. The meaning of the
angles depends on the order the axis rotations are applied in, and every
order is singular when its middle angle reaches +/- pi/2 (gimbal lock).
"""
from collections import namedtuple
from enum import Enum

from .util import column, unpack


class InvalidOrder(ValueError):
    """Raised when an euler order is not one of the six supported orders."""


class EulerOrder(Enum):
    """
    Sequence in which the axis rotations are composed, e.g. XYZ = Rx * Ry * Rz.
    """
    XYZ = 'XYZ'
    XZY = 'XZY'
    YXZ = 'YXZ'
    YZX = 'YZX'
    ZXY = 'ZXY'
    ZYX = 'ZYX'


def check_order(order) -> EulerOrder:
    """
    Converts an order given as an EulerOrder or its name to an EulerOrder.
    :param order: EulerOrder or str
    :return: The EulerOrder.
    """
    if isinstance(order, EulerOrder):
        return order
    if isinstance(order, str):
        try:
            return EulerOrder[order.upper()]
        except KeyError:
            pass
    raise InvalidOrder('invalid euler order: {!r}, expected one of {:s}'.format(
        order, ', '.join(o.name for o in EulerOrder)))


class EulerAngle(namedtuple('EulerAngle', ['x', 'y', 'z', 'order'])):
    """
    Rotation angles [rad] about the x, y and z axes, together with the order
    in which they are applied. The angles are not wrapped to any range.
    """

    __slots__ = ()

    def __new__(cls, x, y, z, order=EulerOrder.XYZ):
        return super().__new__(cls, x, y, z, check_order(order))

    def __add__(self, other):
        return NotImplemented

    def __mul__(self, other):
        return NotImplemented

    def __rmul__(self, other):
        return NotImplemented

    def to_casadi(self):
        return column(self.x, self.y, self.z)

    @classmethod
    def from_casadi(cls, e, order=EulerOrder.XYZ) -> 'EulerAngle':
        assert e.shape == (3, 1)
        return cls(*unpack(e), order=order)
