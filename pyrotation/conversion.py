"""
Conversions between euler angles, quaternions and rotation matrices.

Every order dependent formula is built once as a casadi Function of SX
symbols, so the same expression evaluates numbers and builds symbolic
graphs (e.g. for code generation). Branches (gimbal lock, choice of the
largest quaternion component) are expressed with if_else.
"""
import logging

import casadi as ca

from .dcm import RotationMatrix
from .euler import EulerAngle, EulerOrder, InvalidOrder, check_order
from .quat import Quaternion
from .util import safe_asin

logger = logging.getLogger(__name__)

# |sin| of the middle angle at or above which two axes are treated as aligned
GIMBAL_LOCK_THRESHOLD = 0.99999


def _quat_to_dcm(q):
    x = q[0]
    y = q[1]
    z = q[2]
    w = q[3]
    xy2 = 2 * x * y
    xz2 = 2 * x * z
    xw2 = 2 * x * w
    yz2 = 2 * y * z
    yw2 = 2 * y * w
    zw2 = 2 * z * w
    ww2 = 2 * w * w
    return ca.reshape(ca.vertcat(
        ww2 + 2 * x * x - 1, xy2 + zw2, xz2 - yw2,
        xy2 - zw2, ww2 + 2 * y * y - 1, yz2 + xw2,
        xz2 + yw2, yz2 - xw2, ww2 + 2 * z * z - 1), 3, 3)


def _dcm_to_quat(R):
    px = R[0, 0] - R[1, 1] - R[2, 2] + 1
    py = -R[0, 0] + R[1, 1] - R[2, 2] + 1
    pz = -R[0, 0] - R[1, 1] + R[2, 2] + 1
    pw = R[0, 0] + R[1, 1] + R[2, 2] + 1

    # pick the largest, the first one wins ties
    selected = 0
    p_max = px
    for i, p in enumerate([py, pz, pw], 1):
        larger = p_max < p
        selected = ca.if_else(larger, i, selected)
        p_max = ca.if_else(larger, p, p_max)

    # candidates sum to 4, so p_max >= 1
    b = 0.5 * ca.sqrt(p_max)
    d = 1 / (4 * b)
    q_x = ca.vertcat(b, (R[1, 0] + R[0, 1]) * d, (R[0, 2] + R[2, 0]) * d, (R[2, 1] - R[1, 2]) * d)
    q_y = ca.vertcat((R[1, 0] + R[0, 1]) * d, b, (R[2, 1] + R[1, 2]) * d, (R[0, 2] - R[2, 0]) * d)
    q_z = ca.vertcat((R[0, 2] + R[2, 0]) * d, (R[2, 1] + R[1, 2]) * d, b, (R[1, 0] - R[0, 1]) * d)
    q_w = ca.vertcat((R[2, 1] - R[1, 2]) * d, (R[0, 2] - R[2, 0]) * d, (R[1, 0] - R[0, 1]) * d, b)

    return ca.if_else(
        selected == 0, q_x,
        ca.if_else(selected == 1, q_y,
                   ca.if_else(selected == 2, q_z, q_w)))


# Euler extraction from matrix elements, one per order. Each returns the
# angles (x, y, z) and the sine of the middle angle. When locked, the last
# angle of the sequence is 0 and the first takes the combined rotation.

def _dcm_to_euler_xyz(R):
    s = R[0, 2]
    unlocked = ca.fabs(s) < GIMBAL_LOCK_THRESHOLD
    x = ca.if_else(unlocked, ca.atan2(-R[1, 2], R[2, 2]), ca.atan2(R[2, 1], R[1, 1]))
    y = safe_asin(s)
    z = ca.if_else(unlocked, ca.atan2(-R[0, 1], R[0, 0]), 0)
    return ca.vertcat(x, y, z), s


def _dcm_to_euler_xzy(R):
    s = -R[0, 1]
    unlocked = ca.fabs(s) < GIMBAL_LOCK_THRESHOLD
    x = ca.if_else(unlocked, ca.atan2(R[2, 1], R[1, 1]), ca.atan2(-R[1, 2], R[2, 2]))
    y = ca.if_else(unlocked, ca.atan2(R[0, 2], R[0, 0]), 0)
    z = safe_asin(s)
    return ca.vertcat(x, y, z), s


def _dcm_to_euler_yxz(R):
    s = -R[1, 2]
    unlocked = ca.fabs(s) < GIMBAL_LOCK_THRESHOLD
    x = safe_asin(s)
    y = ca.if_else(unlocked, ca.atan2(R[0, 2], R[2, 2]), ca.atan2(-R[2, 0], R[0, 0]))
    z = ca.if_else(unlocked, ca.atan2(R[1, 0], R[1, 1]), 0)
    return ca.vertcat(x, y, z), s


def _dcm_to_euler_yzx(R):
    s = R[1, 0]
    unlocked = ca.fabs(s) < GIMBAL_LOCK_THRESHOLD
    x = ca.if_else(unlocked, ca.atan2(-R[1, 2], R[1, 1]), 0)
    y = ca.if_else(unlocked, ca.atan2(-R[2, 0], R[0, 0]), ca.atan2(R[0, 2], R[2, 2]))
    z = safe_asin(s)
    return ca.vertcat(x, y, z), s


def _dcm_to_euler_zxy(R):
    s = R[2, 1]
    unlocked = ca.fabs(s) < GIMBAL_LOCK_THRESHOLD
    x = safe_asin(s)
    y = ca.if_else(unlocked, ca.atan2(-R[2, 0], R[2, 2]), 0)
    z = ca.if_else(unlocked, ca.atan2(-R[0, 1], R[1, 1]), ca.atan2(R[1, 0], R[0, 0]))
    return ca.vertcat(x, y, z), s


def _dcm_to_euler_zyx(R):
    s = -R[2, 0]
    unlocked = ca.fabs(s) < GIMBAL_LOCK_THRESHOLD
    x = ca.if_else(unlocked, ca.atan2(R[2, 1], R[2, 2]), 0)
    y = safe_asin(s)
    z = ca.if_else(unlocked, ca.atan2(R[1, 0], R[0, 0]), ca.atan2(-R[0, 1], R[1, 1]))
    return ca.vertcat(x, y, z), s


_DCM_TO_EULER = {
    EulerOrder.XYZ: _dcm_to_euler_xyz,
    EulerOrder.XZY: _dcm_to_euler_xzy,
    EulerOrder.YXZ: _dcm_to_euler_yxz,
    EulerOrder.YZX: _dcm_to_euler_yzx,
    EulerOrder.ZXY: _dcm_to_euler_zxy,
    EulerOrder.ZYX: _dcm_to_euler_zyx,
}


def _euler_to_quat(e, order):
    # half angles
    cx = ca.cos(0.5 * e[0])
    sx = ca.sin(0.5 * e[0])
    cy = ca.cos(0.5 * e[1])
    sy = ca.sin(0.5 * e[1])
    cz = ca.cos(0.5 * e[2])
    sz = ca.sin(0.5 * e[2])
    if order == EulerOrder.XYZ:
        return ca.vertcat(
            cx * sy * sz + sx * cy * cz,
            -sx * cy * sz + cx * sy * cz,
            cx * cy * sz + sx * sy * cz,
            -sx * sy * sz + cx * cy * cz)
    elif order == EulerOrder.XZY:
        return ca.vertcat(
            -cx * sy * sz + sx * cy * cz,
            cx * sy * cz - sx * cy * sz,
            sx * sy * cz + cx * cy * sz,
            sx * sy * sz + cx * cy * cz)
    elif order == EulerOrder.YXZ:
        return ca.vertcat(
            cx * sy * sz + sx * cy * cz,
            -sx * cy * sz + cx * sy * cz,
            cx * cy * sz - sx * sy * cz,
            sx * sy * sz + cx * cy * cz)
    elif order == EulerOrder.YZX:
        return ca.vertcat(
            sx * cy * cz + cx * sy * sz,
            sx * cy * sz + cx * sy * cz,
            -sx * sy * cz + cx * cy * sz,
            -sx * sy * sz + cx * cy * cz)
    elif order == EulerOrder.ZXY:
        return ca.vertcat(
            -cx * sy * sz + sx * cy * cz,
            cx * sy * cz + sx * cy * sz,
            sx * sy * cz + cx * cy * sz,
            -sx * sy * sz + cx * cy * cz)
    elif order == EulerOrder.ZYX:
        return ca.vertcat(
            sx * cy * cz - cx * sy * sz,
            sx * cy * sz + cx * sy * cz,
            -sx * sy * cz + cx * cy * sz,
            sx * sy * sz + cx * cy * cz)
    raise InvalidOrder(order)


def _euler_to_dcm(e, order):
    cx = ca.cos(e[0])
    sx = ca.sin(e[0])
    cy = ca.cos(e[1])
    sy = ca.sin(e[1])
    cz = ca.cos(e[2])
    sz = ca.sin(e[2])
    # elements listed column by column
    if order == EulerOrder.XYZ:
        elements = [
            cy * cz, sx * sy * cz + cx * sz, -cx * sy * cz + sx * sz,
            -cy * sz, -sx * sy * sz + cx * cz, cx * sy * sz + sx * cz,
            sy, -sx * cy, cx * cy]
    elif order == EulerOrder.XZY:
        elements = [
            cy * cz, cx * cy * sz + sx * sy, sx * cy * sz - cx * sy,
            -sz, cx * cz, sx * cz,
            sy * cz, cx * sy * sz - sx * cy, sx * sy * sz + cx * cy]
    elif order == EulerOrder.YXZ:
        elements = [
            sx * sy * sz + cy * cz, cx * sz, sx * cy * sz - sy * cz,
            sx * sy * cz - cy * sz, cx * cz, sx * cy * cz + sy * sz,
            cx * sy, -sx, cx * cy]
    elif order == EulerOrder.YZX:
        elements = [
            cy * cz, sz, -sy * cz,
            -cx * cy * sz + sx * sy, cx * cz, cx * sy * sz + sx * cy,
            sx * cy * sz + cx * sy, -sx * cz, -sx * sy * sz + cx * cy]
    elif order == EulerOrder.ZXY:
        elements = [
            -sx * sy * sz + cy * cz, sx * sy * cz + cy * sz, -cx * sy,
            -cx * sz, cx * cz, sx,
            sx * cy * sz + sy * cz, -sx * cy * cz + sy * sz, cx * cy]
    elif order == EulerOrder.ZYX:
        elements = [
            cy * cz, cy * sz, -sy,
            sx * sy * cz - cx * sz, sx * sy * sz + cx * cz, sx * cy,
            cx * sy * cz + sx * sz, cx * sy * sz - sx * cz, cx * cy]
    else:
        raise InvalidOrder(order)
    return ca.reshape(ca.vertcat(*elements), 3, 3)


def _build_functions():
    e = ca.SX.sym('e', 3)
    q = ca.SX.sym('q', 4)
    R = ca.SX.sym('R', 3, 3)

    functions = {
        'quaternion_to_rotation_matrix': ca.Function(
            'quaternion_to_rotation_matrix', [q], [_quat_to_dcm(q)], ['q'], ['R']),
        'rotation_matrix_to_quaternion': ca.Function(
            'rotation_matrix_to_quaternion', [R], [_dcm_to_quat(R)], ['R'], ['q']),
    }
    for order in EulerOrder:
        suffix = order.name.lower()
        angles, s = _DCM_TO_EULER[order](R)
        functions['rotation_matrix_to_euler_angle', order] = ca.Function(
            'rotation_matrix_to_euler_angle_' + suffix,
            [R], [angles, s], ['R'], ['e', 's'])
        angles, s = _DCM_TO_EULER[order](_quat_to_dcm(q))
        functions['quaternion_to_euler_angle', order] = ca.Function(
            'quaternion_to_euler_angle_' + suffix,
            [q], [angles, s], ['q'], ['e', 's'])
        functions['euler_angle_to_quaternion', order] = ca.Function(
            'euler_angle_to_quaternion_' + suffix,
            [e], [_euler_to_quat(e, order)], ['e'], ['q'])
        functions['euler_angle_to_rotation_matrix', order] = ca.Function(
            'euler_angle_to_rotation_matrix_' + suffix,
            [e], [_euler_to_dcm(e, order)], ['e'], ['R'])
    return functions


_FUNCTIONS = _build_functions()

_ORDER_DEPENDENT = (
    'quaternion_to_euler_angle',
    'rotation_matrix_to_euler_angle',
    'euler_angle_to_quaternion',
    'euler_angle_to_rotation_matrix',
)


def casadi_function(name: str, order=None) -> ca.Function:
    """
    Returns the casadi Function behind a conversion, e.g. for code generation.
    :param name: The conversion name, e.g. 'quaternion_to_euler_angle'.
    :param order: The euler order, required for conversions involving euler angles.
    :return: The casadi Function.
    """
    if name in _ORDER_DEPENDENT:
        return _FUNCTIONS[name, check_order(order)]
    return _FUNCTIONS[name]


def _to_euler_angle(name, arg, order):
    order = check_order(order)
    angles, s = _FUNCTIONS[name, order](arg)
    if isinstance(s, ca.DM) and abs(float(s)) >= GIMBAL_LOCK_THRESHOLD:
        logger.debug("%s: gimbal lock for order %s (sin=%.6f)", name, order.name, float(s))
    return EulerAngle.from_casadi(angles, order)


def quaternion_to_euler_angle(q: Quaternion, order: EulerOrder) -> EulerAngle:
    """
    Converts a unit quaternion to euler angles.
    :param q: The quaternion.
    :param order: The euler order of the result.
    :return: The euler angles.
    """
    return _to_euler_angle('quaternion_to_euler_angle', q.to_casadi(), order)


def rotation_matrix_to_euler_angle(m: RotationMatrix, order: EulerOrder) -> EulerAngle:
    """
    Converts a rotation matrix to euler angles.
    :param m: The rotation matrix.
    :param order: The euler order of the result.
    :return: The euler angles.
    """
    return _to_euler_angle('rotation_matrix_to_euler_angle', m.to_casadi(), order)


def euler_angle_to_quaternion(e: EulerAngle) -> Quaternion:
    f = _FUNCTIONS['euler_angle_to_quaternion', check_order(e.order)]
    return Quaternion.from_casadi(f(e.to_casadi()))


def euler_angle_to_rotation_matrix(e: EulerAngle) -> RotationMatrix:
    f = _FUNCTIONS['euler_angle_to_rotation_matrix', check_order(e.order)]
    return RotationMatrix.from_casadi(f(e.to_casadi()))


def rotation_matrix_to_quaternion(m: RotationMatrix) -> Quaternion:
    """
    Converts a rotation matrix to a quaternion.

    The largest of |x|, |y|, |z|, |w| is found from the diagonal and computed
    first, the others follow from the off diagonal terms, which avoids
    dividing by a small number near 180 degree rotations.
    :param m: The rotation matrix.
    :return: The quaternion.
    """
    f = _FUNCTIONS['rotation_matrix_to_quaternion']
    return Quaternion.from_casadi(f(m.to_casadi()))


def quaternion_to_rotation_matrix(q: Quaternion) -> RotationMatrix:
    f = _FUNCTIONS['quaternion_to_rotation_matrix']
    return RotationMatrix.from_casadi(f(q.to_casadi()))


def to_euler_angle(rotation, order: EulerOrder) -> EulerAngle:
    if isinstance(rotation, Quaternion):
        return quaternion_to_euler_angle(rotation, order)
    if isinstance(rotation, RotationMatrix):
        return rotation_matrix_to_euler_angle(rotation, order)
    raise TypeError('cannot convert {:s} to EulerAngle'.format(type(rotation).__name__))


def to_quaternion(rotation) -> Quaternion:
    if isinstance(rotation, EulerAngle):
        return euler_angle_to_quaternion(rotation)
    if isinstance(rotation, RotationMatrix):
        return rotation_matrix_to_quaternion(rotation)
    raise TypeError('cannot convert {:s} to Quaternion'.format(type(rotation).__name__))


def to_rotation_matrix(rotation) -> RotationMatrix:
    if isinstance(rotation, EulerAngle):
        return euler_angle_to_rotation_matrix(rotation)
    if isinstance(rotation, Quaternion):
        return quaternion_to_rotation_matrix(rotation)
    raise TypeError('cannot convert {:s} to RotationMatrix'.format(type(rotation).__name__))
