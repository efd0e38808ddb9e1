"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Group operations on short Weierstrass curves, in affine coordinates.

The module-level functions taking Points validate their arguments and work on
Point objects. The underscore functions do the arithmetic on bare integer
coordinates, with (0, 0) standing in for the point at infinity.
"""

from ucrypto import MismatchedCurveError, NoModularInverseError
from ucrypto.crypto.bignum import checkInt, checkType
from ucrypto.crypto.ecc.curve import Curve, Point, curveEqual
from ucrypto.crypto.number import modInv


def _isIdentity(x, y):
    return x == 0 and y == 0


def _double(x, y, curve):
    """
    Tangent doubling. A point whose tangent is vertical (2y not invertible
    mod p) doubles to the identity.
    """
    if _isIdentity(x, y):
        return 0, 0
    p = curve.p
    try:
        inv = modInv((2 * y) % p, p)
    except NoModularInverseError:
        return 0, 0
    lam = ((3 * x * x + curve.a) * inv) % p
    x3 = (lam * lam - 2 * x) % p
    y3 = (lam * (x - x3) - y) % p
    return x3, y3


def _add(x1, y1, x2, y2, curve):
    """
    Chord addition, falling back to doubling for equal points. If x2 - x1 has
    no inverse mod p, the sum is the identity.
    """
    if _isIdentity(x1, y1):
        return x2, y2
    if _isIdentity(x2, y2):
        return x1, y1
    p = curve.p
    if x1 == x2 and y1 == y2:
        return _double(x1, y1, curve)
    if x1 == x2 and (y1 + y2) % p == 0:
        return 0, 0
    try:
        inv = modInv((x2 - x1) % p, p)
    except NoModularInverseError:
        return 0, 0
    lam = ((y2 - y1) * inv) % p
    x3 = (lam * lam - x1 - x2) % p
    y3 = (lam * (x1 - x3) - y1) % p
    return x3, y3


def _mul(x, y, k, curve):
    """
    k * (x, y) with a left-to-right ladder. R0 starts at the point and R1 at
    its double, and the invariant R1 = R0 + P holds after every step.
    """
    if k < 0:
        y = -y % curve.p
        k = -k
    if k == 0 or _isIdentity(x, y):
        return 0, 0
    if k == 1:
        return x, y
    if k == 2:
        return _double(x, y, curve)
    r0 = (x, y)
    r1 = _double(x, y, curve)
    for i in range(k.bit_length() - 2, -1, -1):
        if (k >> i) & 1:
            r0 = _add(*r0, *r1, curve)
            r1 = _double(*r1, curve)
        else:
            r1 = _add(*r0, *r1, curve)
            r0 = _double(*r0, curve)
    return r0


def _shamir(x1, y1, k1, x2, y2, k2, curve):
    """
    k1 * (x1, y1) + k2 * (x2, y2), sharing the doublings between both
    scalars.
    """
    p = curve.p
    if k1 < 0:
        y1, k1 = -y1 % p, -k1
    if k2 < 0:
        y2, k2 = -y2 % p, -k2
    both = _add(x1, y1, x2, y2, curve)
    acc = (0, 0)
    for i in range(max(k1.bit_length(), k2.bit_length()) - 1, -1, -1):
        acc = _double(*acc, curve)
        b1 = (k1 >> i) & 1
        b2 = (k2 >> i) & 1
        if b1 and b2:
            acc = _add(*acc, *both, curve)
        elif b1:
            acc = _add(*acc, x1, y1, curve)
        elif b2:
            acc = _add(*acc, x2, y2, curve)
    return acc


def _checkPoint(point, curve, index):
    checkType(point, Point, index)
    if not curveEqual(point.curve, curve):
        raise MismatchedCurveError()
    return point


def pointEqual(p1, p2):
    """
    Whether two points on the same curve have the same coordinates.

    Args:
        p1 (Point): A point.
        p2 (Point): Another point.

    Returns:
        bool: True if the coordinates match.

    Raises:
        MismatchedCurveError: The points are on different curves.
    """
    checkType(p1, Point, 1)
    checkType(p2, Point, 2)
    if not curveEqual(p1.curve, p2.curve):
        raise MismatchedCurveError()
    return p1.x == p2.x and p1.y == p2.y


def identity(curve):
    """
    The point at infinity, (0, 0), on the curve.
    """
    checkType(curve, Curve, 1)
    return Point(0, 0, curve)


def pointDouble(point, curve):
    """
    pointDouble returns 2*point.

    Args:
        point (Point): The point.
        curve (Curve): The curve the point is on.

    Returns:
        Point: The double.
    """
    checkType(curve, Curve, 2)
    _checkPoint(point, curve, 1)
    return Point(*_double(point.x, point.y, curve), curve)


def pointAdd(p1, p2, curve):
    """
    pointAdd returns p1 + p2.

    Args:
        p1 (Point): A point.
        p2 (Point): Another point.
        curve (Curve): The curve both points are on.

    Returns:
        Point: The sum.
    """
    checkType(curve, Curve, 3)
    _checkPoint(p1, curve, 1)
    _checkPoint(p2, curve, 2)
    return Point(*_add(p1.x, p1.y, p2.x, p2.y, curve), curve)


def pointNeg(point, curve):
    """
    pointNeg returns -point, (x, -y mod p). The identity is its own negation.
    """
    checkType(curve, Curve, 2)
    _checkPoint(point, curve, 1)
    if point.isIdentity():
        return Point(0, 0, curve)
    return Point(point.x, -point.y % curve.p, curve)


def pointSub(p1, p2, curve):
    """
    pointSub returns p1 - p2.
    """
    checkType(curve, Curve, 3)
    _checkPoint(p1, curve, 1)
    _checkPoint(p2, curve, 2)
    neg = pointNeg(p2, curve)
    return Point(*_add(p1.x, p1.y, neg.x, neg.y, curve), curve)


def pointMul(point, scalar, curve):
    """
    pointMul returns scalar*point. A negative scalar multiplies the negated
    point. 0*point and scalar*identity are the identity.

    Args:
        point (Point): The point.
        scalar (int): The multiplier.
        curve (Curve): The curve the point is on.

    Returns:
        Point: The product.
    """
    checkInt(scalar, 2)
    checkType(curve, Curve, 3)
    _checkPoint(point, curve, 1)
    return Point(*_mul(point.x, point.y, scalar, curve), curve)


def shamirsTrick(point1, scalar1, point2, scalar2, curve):
    """
    shamirsTrick returns scalar1*point1 + scalar2*point2 in a single pass
    over the bits of the scalars.

    Args:
        point1 (Point): The first point.
        scalar1 (int): The first multiplier.
        point2 (Point): The second point.
        scalar2 (int): The second multiplier.
        curve (Curve): The curve both points are on.

    Returns:
        Point: The combination.
    """
    checkInt(scalar1, 2)
    checkInt(scalar2, 4)
    checkType(curve, Curve, 5)
    _checkPoint(point1, curve, 1)
    _checkPoint(point2, curve, 3)
    res = _shamir(point1.x, point1.y, scalar1, point2.x, point2.y, scalar2, curve)
    return Point(*res, curve)
