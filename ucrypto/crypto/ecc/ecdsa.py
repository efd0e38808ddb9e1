"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

ECDSA over the curves in ucrypto.crypto.ecc.curve.

sign and verify take the message digest as a hex string. Hashing is the
caller's job, and messageDigest is provided for it. The signing nonce is also
supplied by the caller.
"""

import hashlib

from blake256.blake256 import blake_hash

from ucrypto import InvalidHexError, NonHexDigitError, UCryptoError
from ucrypto.crypto import rando
from ucrypto.crypto.bignum import checkInt, checkType
from ucrypto.crypto.ecc import group
from ucrypto.crypto.ecc.curve import Curve, Point, Signature
from ucrypto.crypto.number import modInv
from ucrypto.util import helpers
from ucrypto.util.encode import HEX_DIGITS, hexlify, intFromBytes


log = helpers.getLogger("ECDSA")


def digestToInt(digestHex, q):
    """
    Convert a hex digest to the integer e used in signing. If the digest has
    more bits than q, only the leftmost bits are kept. The bit count of the
    digest is four per hex character, leading zeros included.

    Args:
        digestHex (str or bytes): The hex digest.
        q (int): The curve order.

    Returns:
        int: e.
    """
    if isinstance(digestHex, (bytes, bytearray)):
        try:
            digestHex = digestHex.decode("ascii")
        except UnicodeDecodeError:
            raise NonHexDigitError()
    elif not isinstance(digestHex, str):
        raise UCryptoError(f"digest must be a hex string, got {type(digestHex).__name__}")
    if not digestHex:
        raise InvalidHexError("empty digest")
    if not HEX_DIGITS.issuperset(digestHex):
        raise NonHexDigitError()
    e = int(digestHex, 16)
    excess = len(digestHex) * 4 - q.bit_length()
    if excess > 0:
        e >>= excess
    return e


def sign(digestHex, d, k, curve):
    """
    Sign the digest with private key d and nonce k.

    Args:
        digestHex (str): The message digest, hex encoded.
        d (int): The private key.
        k (int): The nonce. It must be secret, unpredictable and never reused.
        curve (Curve): The curve.

    Returns:
        Signature: (r, s), both reduced mod q.

    Raises:
        NoModularInverseError: k has no inverse mod q.
    """
    checkInt(d, 2)
    checkInt(k, 3)
    checkType(curve, Curve, 4)
    q = curve.q
    e = digestToInt(digestHex, q)
    kInv = modInv(k, q)
    R = group.pointMul(curve.G, k, curve)
    r = R.x % q
    s = (kInv * (e + d * r)) % q
    if r == 0 or s == 0:
        log.warning("degenerate signature, a different nonce should be used")
    return Signature(r, s)


def verify(sig, digestHex, Q, curve):
    """
    Check the signature against the digest and public key Q.

    Args:
        sig (Signature): The signature.
        digestHex (str): The message digest, hex encoded.
        Q (Point): The public key.
        curve (Curve): The curve.

    Returns:
        bool: True if the signature is valid.

    Raises:
        NoModularInverseError: s has no inverse mod q.
    """
    checkType(sig, Signature, 1)
    checkType(Q, Point, 3)
    checkType(curve, Curve, 4)
    q = curve.q
    e = digestToInt(digestHex, q)
    w = modInv(sig.s, q)
    u1 = (e * w) % q
    u2 = (sig.r * w) % q
    X = group.shamirsTrick(curve.G, u1, Q, u2, curve)
    return X.x % q == sig.r


def messageDigest(msg, algo="sha256"):
    """
    Hash the message and hex encode the digest, ready for sign and verify.

    Args:
        msg (bytes-like): The message.
        algo (str): "blake256", or any algorithm name hashlib knows.

    Returns:
        str: The hex digest.
    """
    if algo == "blake256":
        return hexlify(blake_hash(bytes(msg)))
    try:
        h = hashlib.new(algo)
    except ValueError:
        raise UCryptoError(f"unknown hash algorithm {algo!r}")
    h.update(msg)
    return h.hexdigest()


def randScalar(curve, rng=None):
    """
    A random integer in [1, q - 1]. Eight extra bytes are drawn so that the
    modular reduction has negligible bias.

    Args:
        curve (Curve): The curve.
        rng (RandomSource): Optional. The random source.

    Returns:
        int: The scalar.
    """
    checkType(curve, Curve, 1)
    if curve.q < 2:
        raise UCryptoError("curve order too small")
    rng = rando.source(rng)
    b = rng.randBytes((curve.q.bit_length() + 7) // 8 + 8)
    return intFromBytes(b) % (curve.q - 1) + 1


def generateKey(curve, rng=None):
    """
    Generate a key pair.

    Args:
        curve (Curve): The curve.
        rng (RandomSource): Optional. The random source.

    Returns:
        int: The private key d.
        Point: The public key d*G.
    """
    d = randScalar(curve, rng)
    return d, group.pointMul(curve.G, d, curve)
