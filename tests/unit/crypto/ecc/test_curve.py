"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details
"""

import pytest

from ucrypto import (
    InvalidArgumentTypeError,
    InvalidCurveError,
    MismatchedCurveError,
    NonHexDigitError,
    OddLengthHexError,
    OutOfRangeError,
    UCryptoError,
)
from ucrypto.crypto.ecc import curve
from ucrypto.crypto.ecc.curve import Curve, Point, Signature


def test_namedCurves():
    for c in (curve.secp192r1, curve.secp256r1, curve.secp384r1, curve.secp256k1):
        assert c.G in c
        assert curve.pointInCurve(c.G, c)
        assert curve.namedCurve(c.name) is c
    assert curve.namedCurve("P-256") is curve.secp256r1
    assert curve.namedCurve("prime256v1") is curve.secp256r1
    assert curve.namedCurve("SECP256K1") is curve.secp256k1
    assert curve.secp256k1.oid == bytes.fromhex("2b8104000a")
    assert curve.secp256k1.p.bit_length() == 256
    assert curve.secp384r1.q.bit_length() == 384
    with pytest.raises(UCryptoError):
        curve.namedCurve("curve25519")


def test_Curve(toyCurve):
    c = toyCurve
    assert (c.p, c.a, c.b, c.q, c.gx, c.gy) == (17, 2, 2, 19, 5, 1)
    assert c.params() == (17, 2, 2, 19, 5, 1)
    assert c.name == "toy17"
    assert c.oid == b""
    assert isinstance(c.G, Point)
    assert (c.G.x, c.G.y) == (5, 1)
    assert c.G.curve is c

    assert Curve(17, 2, 2, 19, 5, 1, oid=b"\x01\x02").oid == b"\x01\x02"
    assert Curve(17, 2, 2, 19, 5, 1, oid="0102").oid == b"\x01\x02"
    with pytest.raises(OddLengthHexError):
        Curve(17, 2, 2, 19, 5, 1, oid="012")
    with pytest.raises(NonHexDigitError):
        Curve(17, 2, 2, 19, 5, 1, oid="0g")
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        Curve(17, 2, 2, 19, 5, 1, oid=12)
    assert excinfo.value.index == 8
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        Curve(17, 2, "2", 19, 5, 1)
    assert excinfo.value.index == 3
    with pytest.raises(InvalidArgumentTypeError):
        Curve(17, 2, 2, 19, 5, 1, name=5)
    with pytest.raises(InvalidCurveError):
        Curve(17, 2, 2, 19, 5, 2)
    with pytest.raises(InvalidCurveError):
        Curve(0, 2, 2, 19, 5, 1)
    with pytest.raises(OutOfRangeError):
        Curve(17, 2, 2, 19, 5 + 17, 1)
    with pytest.raises(OutOfRangeError):
        Curve(17, 2, 2, 19, 5, -16)

    # Read-only.
    with pytest.raises(AttributeError):
        c.p = 19


def test_curveEqual(toyCurve):
    other = Curve(17, 2, 2, 19, 5, 1, name="other", oid="01")
    assert curve.curveEqual(toyCurve, other)
    assert toyCurve == other
    assert hash(toyCurve) == hash(other)
    assert toyCurve != curve.secp256k1
    assert not curve.curveEqual(toyCurve, Curve(17, 2, 2, 19, 6, 3))
    assert not curve.curveEqual(toyCurve, Curve(17, 2, 2, 18, 5, 1))
    assert toyCurve != "toy17"
    with pytest.raises(InvalidArgumentTypeError):
        curve.curveEqual(toyCurve, "toy17")


def test_pointInCurve(toyCurve):
    assert curve.pointInCurve(Point(6, 3, toyCurve), toyCurve)
    assert curve.pointInCurve(Point(0, 6, toyCurve), toyCurve)
    assert not curve.pointInCurve(Point(6, 4, toyCurve), toyCurve)
    # The identity encoding only satisfies the equation when b = 0 mod p.
    assert Point(0, 0, toyCurve) not in toyCurve
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        curve.pointInCurve(Point(6, 3, toyCurve), (6, 3))
    assert excinfo.value.index == 2
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        curve.pointInCurve((6, 3), toyCurve)
    assert excinfo.value.index == 1


def test_Point(toyCurve):
    pt = Point(6, 3, toyCurve)
    assert (pt.x, pt.y) == (6, 3)
    assert not pt.isIdentity()
    assert Point(0, 0, toyCurve).isIdentity()
    assert pt == Point(6, 3, Curve(17, 2, 2, 19, 5, 1, name="copy"))
    assert pt != Point(6, 14, toyCurve)
    assert pt != (6, 3)
    assert hash(pt) == hash(Point(6, 3, toyCurve))
    with pytest.raises(MismatchedCurveError):
        pt == curve.secp256k1.G
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        Point(6, None, toyCurve)
    assert excinfo.value.index == 2
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        Point(6, 3, "toy")
    assert excinfo.value.index == 3
    with pytest.raises(AttributeError):
        pt.x = 1


def test_Point_unreduced(toyCurve):
    G = toyCurve.G
    # Congruent to G, but not reduced.
    for x, y in ((G.x + 17, G.y), (G.x, G.y - 17), (17, 0), (-1, 0)):
        with pytest.raises(OutOfRangeError):
            Point(x, y, toyCurve)
    Point(16, 16, toyCurve)
    # Reduced coordinates keep G + G on the doubling path.
    assert (G + G) == Point(6, 3, toyCurve)


def test_Signature():
    sig = Signature(1, 2)
    assert (sig.r, sig.s) == (1, 2)
    assert sig == Signature(1, 2)
    assert sig != Signature(2, 1)
    assert sig != (1, 2)
    assert hash(sig) == hash(Signature(1, 2))
    # No reduction on direct construction.
    assert Signature(-5, 10 ** 100).s == 10 ** 100
    with pytest.raises(InvalidArgumentTypeError):
        Signature(1, "2")


def test_repr(toyCurve):
    c = Curve(17, 2, 2, 19, 5, 1, name="toy17", oid="2b0a")
    assert repr(c) == "<Curve name=toy17 oid=2b0a p=17 a=2 b=2 q=19 gx=5 gy=1>"
    assert repr(Point(6, 3, c)) == (
        "<Point x=6 y=3 curve=<Curve name=toy17 oid=2b0a p=17 a=2 b=2 q=19 gx=5 gy=1>>"
    )
    assert repr(Signature(3, 4)) == "<Signature r=3 s=4>"
    assert repr(toyCurve).startswith("<Curve name=toy17 oid= p=17")
