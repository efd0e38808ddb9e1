"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

The bridge between Python integers and the sign-magnitude form used at the
engine boundary, plus the argument checks shared by every public operation.
"""

from ucrypto import AllocationFailureError, InvalidArgumentTypeError, UCryptoError
from ucrypto.util.encode import intFromBytes, intToBytes


ZPOS = 0
NEG = 1

# Largest magnitude, in bits, any engine value may have.
MAX_BITS = 8192


def checkCapacity(i):
    """
    Raise AllocationFailureError if |i| does not fit in MAX_BITS.
    """
    bits = abs(i).bit_length()
    if bits > MAX_BITS:
        raise AllocationFailureError((bits + 7) // 8)


def checkInt(value, index=1):
    """
    Validate an integer argument.

    Args:
        value (any): The argument.
        index (int): The 1-based argument position, for the error message.

    Returns:
        int: value.

    Raises:
        InvalidArgumentTypeError: value is not an int. bool is rejected.
        AllocationFailureError: value is too large.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentTypeError(index, "int", type(value).__name__)
    checkCapacity(value)
    return value


def checkType(value, cls, index=1):
    """
    Validate that an argument is an instance of cls.

    Returns:
        value
    """
    if not isinstance(value, cls):
        raise InvalidArgumentTypeError(index, cls.__name__, type(value).__name__)
    return value


def toSignMagnitude(i):
    """
    Split an integer into its sign and big-endian magnitude.

    Args:
        i (int): The integer.

    Returns:
        int: ZPOS or NEG. Zero is always ZPOS.
        bytes: The minimal magnitude bytes. Zero is a single zero byte.
    """
    checkInt(i)
    sign = NEG if i < 0 else ZPOS
    return sign, intToBytes(abs(i))


def fromSignMagnitude(sign, magnitude):
    """
    Rebuild an integer from toSignMagnitude output.

    Args:
        sign (int): ZPOS or NEG.
        magnitude (bytes-like): Big-endian magnitude.

    Returns:
        int: The integer.
    """
    if sign not in (ZPOS, NEG):
        raise UCryptoError(f"invalid sign {sign}")
    if len(magnitude) * 8 > MAX_BITS:
        raise AllocationFailureError(len(magnitude))
    i = intFromBytes(magnitude)
    return -i if sign == NEG else i


def countBits(i):
    """The bit length of the magnitude of i."""
    return abs(i).bit_length()

