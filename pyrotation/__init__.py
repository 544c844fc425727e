"""
Rotation representations for SO(3), the 3D rotation group, and the conversions between them.

euler: 3 parameters (6 axis orders), singular when the middle angle is +/- pi/2
quat: 4 parameters, no singularities, q and -q are the same rotation
dcm: 9 parameters, no singularities
"""
from .vector3 import Vector3
from .euler import EulerAngle, EulerOrder, InvalidOrder
from .quat import Quaternion, conjugate
from .dcm import RotationMatrix
from .conversion import (
    GIMBAL_LOCK_THRESHOLD,
    casadi_function,
    euler_angle_to_quaternion,
    euler_angle_to_rotation_matrix,
    quaternion_to_euler_angle,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_euler_angle,
    rotation_matrix_to_quaternion,
    to_euler_angle,
    to_quaternion,
    to_rotation_matrix,
)
