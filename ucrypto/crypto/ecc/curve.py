"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Value types for elliptic curves in short Weierstrass form,
y^2 = x^3 + ax + b (mod p). The point at infinity is represented by the
coordinates (0, 0).
"""

from ucrypto import (
    InvalidArgumentTypeError,
    InvalidCurveError,
    OutOfRangeError,
    UCryptoError,
)
from ucrypto.crypto.bignum import checkInt, checkType
from ucrypto.util.encode import hexlify, unhexlify


class Curve:
    """
    Curve is an immutable set of domain parameters.

    Two curves are equal when p, a, b, q, gx and gy match. name and oid are
    labels and take no part in equality.
    """

    def __init__(self, p, a, b, q, gx, gy, name=None, oid=None):
        """
        Args:
            p (int): The field prime.
            a (int): The a coefficient.
            b (int): The b coefficient.
            q (int): The order of the generator.
            gx (int): Generator x coordinate.
            gy (int): Generator y coordinate.
            name (str): Optional. A human-readable name.
            oid (bytes or str): Optional. The DER-encoded object identifier
                value, as bytes or a hex string.
        """
        for i, v in enumerate((p, a, b, q, gx, gy)):
            checkInt(v, i + 1)
        if p <= 0 or q <= 0:
            raise InvalidCurveError("curve p and q must be positive")
        if not (0 <= gx < p and 0 <= gy < p):
            raise OutOfRangeError(f"generator coordinates must be in [0, {p})")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise InvalidArgumentTypeError(7, "str", type(name).__name__)
        if oid is None:
            oid = b""
        elif isinstance(oid, str):
            oid = unhexlify(oid)
        elif isinstance(oid, (bytes, bytearray)):
            oid = bytes(oid)
        else:
            raise InvalidArgumentTypeError(8, "bytes", type(oid).__name__)
        self._p = p
        self._a = a
        self._b = b
        self._q = q
        self._gx = gx
        self._gy = gy
        self._name = name
        self._oid = oid
        if not pointInCurve(self.G, self):
            raise InvalidCurveError(f"generator ({gx}, {gy}) is not on the curve")

    @property
    def p(self):
        return self._p

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def q(self):
        return self._q

    @property
    def gx(self):
        return self._gx

    @property
    def gy(self):
        return self._gy

    @property
    def name(self):
        return self._name

    @property
    def oid(self):
        return self._oid

    @property
    def G(self):
        """The generator as a Point."""
        return Point(self._gx, self._gy, self)

    def params(self):
        """
        The parameters that define the curve.

        Returns:
            tuple(int): p, a, b, q, gx, gy.
        """
        return (self._p, self._a, self._b, self._q, self._gx, self._gy)

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return curveEqual(self, other)

    def __hash__(self):
        return hash(self.params())

    def __contains__(self, point):
        return pointInCurve(point, self)

    def __repr__(self):
        return "<Curve name=%s oid=%s p=%d a=%d b=%d q=%d gx=%d gy=%d>" % (
            (self._name, hexlify(self._oid)) + self.params()
        )


class Point:
    """
    Point is an immutable point on a Curve. Coordinates (0, 0) denote the
    point at infinity. Both coordinates must be reduced, i.e. in [0, p).

    Points support +, -, unary -, and multiplication by an int on either
    side. Combining or comparing points from different curves raises
    MismatchedCurveError.
    """

    def __init__(self, x, y, curve):
        checkInt(x, 1)
        checkInt(y, 2)
        checkType(curve, Curve, 3)
        if not (0 <= x < curve.p and 0 <= y < curve.p):
            raise OutOfRangeError(f"point coordinates must be in [0, {curve.p})")
        self._x = x
        self._y = y
        self._curve = curve

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def curve(self):
        return self._curve

    def isIdentity(self):
        return self._x == 0 and self._y == 0

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        from ucrypto.crypto.ecc import group

        return group.pointEqual(self, other)

    def __hash__(self):
        return hash((self._x, self._y, self._curve))

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        from ucrypto.crypto.ecc import group

        return group.pointAdd(self, other, self._curve)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        from ucrypto.crypto.ecc import group

        return group.pointSub(self, other, self._curve)

    def __neg__(self):
        from ucrypto.crypto.ecc import group

        return group.pointNeg(self, self._curve)

    def __mul__(self, k):
        if isinstance(k, bool) or not isinstance(k, int):
            return NotImplemented
        from ucrypto.crypto.ecc import group

        return group.pointMul(self, k, self._curve)

    __rmul__ = __mul__

    def __repr__(self):
        return "<Point x=%d y=%d curve=%r>" % (self._x, self._y, self._curve)


class Signature:
    """
    An ECDSA signature (r, s).
    """

    def __init__(self, r, s):
        checkInt(r, 1)
        checkInt(s, 2)
        self._r = r
        self._s = s

    @property
    def r(self):
        return self._r

    @property
    def s(self):
        return self._s

    def __eq__(self, other):
        if not isinstance(other, Signature):
            return NotImplemented
        return self._r == other._r and self._s == other._s

    def __hash__(self):
        return hash((self._r, self._s))

    def __repr__(self):
        return "<Signature r=%d s=%d>" % (self._r, self._s)


def pointInCurve(point, curve):
    """
    Whether the point's coordinates satisfy the curve equation.
    The point's own curve is not consulted.

    Args:
        point (Point): The point.
        curve (Curve): The curve.

    Returns:
        bool: True if y^2 = x^3 + ax + b (mod p).
    """
    checkType(point, Point, 1)
    checkType(curve, Curve, 2)
    x, y = point.x, point.y
    return (y * y - (x * x * x + curve.a * x + curve.b)) % curve.p == 0


def curveEqual(c1, c2):
    """
    Whether two curves have the same parameters. Names and oids are ignored.

    Args:
        c1 (Curve): A curve.
        c2 (Curve): Another curve.

    Returns:
        bool: True if p, a, b, q, gx and gy all match.
    """
    checkType(c1, Curve, 1)
    checkType(c2, Curve, 2)
    return c1.params() == c2.params()


# Curves from SEC 2: Recommended Elliptic Curve Domain Parameters.
secp192r1 = Curve(
    p=2 ** 192 - 2 ** 64 - 1,
    a=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFFFFFFFFFC,
    b=0x64210519E59C80E70FA7E9AB72243049FEB8DEECC146B9B1,
    q=0xFFFFFFFFFFFFFFFFFFFFFFFF99DEF836146BC9B1B4D22831,
    gx=0x188DA80EB03090F67CBF20EB43A18800F4FF0AFD82FF1012,
    gy=0x07192B95FFC8DA78631011ED6B24CDD573F977A11E794811,
    name="secp192r1",
    oid="2a8648ce3d030101",
)

secp256r1 = Curve(
    p=2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    a=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
    q=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
    name="secp256r1",
    oid="2a8648ce3d030107",
)

secp384r1 = Curve(
    p=2 ** 384 - 2 ** 128 - 2 ** 96 + 2 ** 32 - 1,
    a=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFFFF0000000000000000FFFFFFFC,
    b=0xB3312FA7E23EE7E4988E056BE3F82D19181D9C6EFE8141120314088F5013875AC656398D8A2ED19D2A85C8EDD3EC2AEF,
    q=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF581A0DB248B0A77AECEC196ACCC52973,
    gx=0xAA87CA22BE8B05378EB1C71EF320AD746E1D3B628BA79B9859F741E082542A385502F25DBF55296C3A545E3872760AB7,
    gy=0x3617DE4A96262C6F5D9E98BF9292DC29F8F41DBD289A147CE9DA3113B5F0B8C00A60B1CE1D7E819D7A431D7C90EA0E5F,
    name="secp384r1",
    oid="2b81040022",
)

secp256k1 = Curve(
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    q=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    name="secp256k1",
    oid="2b8104000a",
)

_namedCurves = {
    "secp192r1": secp192r1,
    "p-192": secp192r1,
    "prime192v1": secp192r1,
    "secp256r1": secp256r1,
    "p-256": secp256r1,
    "prime256v1": secp256r1,
    "secp384r1": secp384r1,
    "p-384": secp384r1,
    "secp256k1": secp256k1,
}


def namedCurve(name):
    """
    Look up a standard curve by name or alias. Case-insensitive.

    Args:
        name (str): e.g. "secp256k1" or "P-256".

    Returns:
        Curve: The curve.
    """
    try:
        return _namedCurves[name.lower()]
    except KeyError:
        raise UCryptoError(f"unknown curve {name!r}")
