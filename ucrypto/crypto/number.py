"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Modular arithmetic on arbitrary-precision integers.
"""

from ucrypto import InvalidModulusError, NoModularInverseError
from ucrypto.crypto.bignum import checkInt


# Montgomery R is a power of 2**DIGIT_BIT.
DIGIT_BIT = 64


def _checkModulus(m):
    if m <= 0:
        raise InvalidModulusError(f"modulus must be positive, got {m}")


def egcd(a, b):
    """
    Calculate the extended Euclidean algorithm. ax + by = gcd(a,b)

    Args:
        a (int): An integer.
        b (int): Another integer.

    Returns:
        int: Greatest common divisor. Never negative.
        int: x coefficient of Bezout's identity.
        int: y coefficient of Bezout's identity.
    """
    x0, x1, y0, y1 = 1, 0, 0, 1
    while b:
        q, a, b = a // b, b, a % b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    if a < 0:
        return -a, -x0, -y0
    return a, x0, y0


def gcd(a, b):
    """
    Greatest common divisor of a and b. gcd(0, 0) is 0.

    Args:
        a (int): An integer.
        b (int): Another integer.

    Returns:
        int: The non-negative gcd.
    """
    checkInt(a, 1)
    checkInt(b, 2)
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def modInv(a, m):
    """
    Modular inverse. Raises an exception if impossible.

    Args:
        a (int): An integer.
        m (int): The modulus.

    Returns:
        int: x in [0, m) with a*x = 1 (mod m).

    Raises:
        InvalidModulusError: m is not positive.
        NoModularInverseError: a and m share a factor.
    """
    checkInt(a, 1)
    checkInt(m, 2)
    _checkModulus(m)
    g, x, _ = egcd(a % m, m)
    if g != 1:
        raise NoModularInverseError("modular inverse does not exist")
    return x % m


def modPow(base, exponent, modulus):
    """
    base**exponent mod modulus by square-and-multiply. Works for any positive
    modulus, odd or even. A negative exponent uses the inverse of base.

    Args:
        base (int): The base.
        exponent (int): The exponent.
        modulus (int): The modulus.

    Returns:
        int: The result, in [0, modulus).
    """
    checkInt(base, 1)
    checkInt(exponent, 2)
    checkInt(modulus, 3)
    _checkModulus(modulus)
    if exponent < 0:
        base = modInv(base, modulus)
        exponent = -exponent
    x = base % modulus
    y = 1
    while exponent > 0:
        if exponent & 1:
            y = (x * y) % modulus
            exponent -= 1
        else:
            x = (x * x) % modulus
            exponent >>= 1
    return y % modulus


fastPow = modPow


class MontgomeryContext:
    """
    Precomputed values for Montgomery multiplication modulo an odd m.
    R = 2**rBits where rBits is the bit length of m rounded up to a whole
    number of DIGIT_BIT digits.
    """

    def __init__(self, m):
        if m <= 1 or m % 2 == 0:
            raise InvalidModulusError(f"montgomery reduction needs an odd modulus > 1, got {m}")
        self.m = m
        digits = (m.bit_length() + DIGIT_BIT - 1) // DIGIT_BIT
        self.rBits = digits * DIGIT_BIT
        self.mask = (1 << self.rBits) - 1
        r = 1 << self.rBits
        # mPrime = -m^-1 mod R
        self.mPrime = (-egcd(m, r)[1]) & self.mask
        self.r2 = (r * r) % m
        self.one = r % m

    def reduce(self, t):
        """
        REDC. t * R^-1 mod m for 0 <= t < m*R.
        """
        u = ((t & self.mask) * self.mPrime) & self.mask
        t = (t + u * self.m) >> self.rBits
        return t - self.m if t >= self.m else t

    def toMont(self, a):
        return self.reduce((a % self.m) * self.r2)

    def fromMont(self, a):
        return self.reduce(a)

    def mul(self, a, b):
        """Montgomery product of two values already in Montgomery form."""
        return self.reduce(a * b)

    def pow(self, base, exponent):
        """
        base**exponent mod m for exponent >= 0. The result is in normal
        (not Montgomery) form.
        """
        x = self.toMont(base)
        acc = self.one
        for i in range(exponent.bit_length() - 1, -1, -1):
            acc = self.mul(acc, acc)
            if (exponent >> i) & 1:
                acc = self.mul(acc, x)
        return self.fromMont(acc)


def montgomery(modulus):
    """
    Build a MontgomeryContext for repeated exponentiation against modulus.
    """
    checkInt(modulus, 1)
    return MontgomeryContext(modulus)


def expTMod(base, exponent, modulus, safe=False):
    """
    base**exponent mod modulus using Montgomery reduction. Montgomery needs
    an odd modulus. With an even modulus, safe=True falls back to modPow and
    safe=False raises.

    Args:
        base (int): The base.
        exponent (int): The exponent. Negative uses the inverse of base.
        modulus (int): The modulus.
        safe (bool): Allow the fallback for even moduli.

    Returns:
        int: The result, in [0, modulus).

    Raises:
        InvalidModulusError: modulus is not positive, or is even and safe is
            False.
    """
    checkInt(base, 1)
    checkInt(exponent, 2)
    checkInt(modulus, 3)
    _checkModulus(modulus)
    if modulus % 2 == 0:
        if safe:
            return modPow(base, exponent, modulus)
        raise InvalidModulusError("'exptmod' need odd modulus, set 'safe' or use 'fastPow'")
    if modulus == 1:
        return 0
    if exponent < 0:
        base = modInv(base, modulus)
        exponent = -exponent
    return MontgomeryContext(modulus).pow(base, exponent)
