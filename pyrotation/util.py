import casadi as ca


def unpack(expr):
    """
    Splits a casadi vector or matrix into its scalar elements, column-major.

    Numeric (DM) values are returned as python floats, symbolic values
    are returned as 1x1 expressions of the same type.

    @expr: casadi DM, SX or MX
    @return: list of scalars
    """
    v = ca.vec(expr)
    if isinstance(v, ca.DM):
        return [float(c) for c in v.full().flatten()]
    return [v[i] for i in range(v.shape[0])]


def column(*args):
    """
    Stacks scalars into a casadi column vector (DM for numbers, SX/MX for symbols).
    """
    return ca.vertcat(*args)


# asin that tolerates round off just outside of [-1, 1]
def safe_asin(x):
    return ca.asin(ca.fmin(ca.fmax(x, -1), 1))
