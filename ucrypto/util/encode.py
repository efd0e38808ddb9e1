"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Hex and big-endian integer encoding helpers.
"""

from ucrypto import NonHexDigitError, OddLengthHexError, UCryptoError


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hexlify(b):
    """
    Encode the bytes as a lowercase hexadecimal string.

    Args:
        b (bytes-like): The bytes to encode.

    Returns:
        str: The hex string, two characters per byte.
    """
    return bytes(b).hex()


def unhexlify(s):
    """
    Strictly decode a hexadecimal string. Whitespace and prefixes are not
    tolerated.

    Args:
        s (str or bytes): The hex string. bytes are interpreted as ASCII.

    Returns:
        bytes: The decoded bytes.

    Raises:
        OddLengthHexError: The input has an odd number of characters.
        NonHexDigitError: The input contains a character that is not a hex
            digit.
    """
    if isinstance(s, (bytes, bytearray)):
        try:
            s = s.decode("ascii")
        except UnicodeDecodeError:
            raise NonHexDigitError()
    if len(s) % 2:
        raise OddLengthHexError()
    if not HEX_DIGITS.issuperset(s):
        raise NonHexDigitError()
    return bytes.fromhex(s)


def intToBytes(i):
    """
    Encodes a non-negative integer to its minimal big-endian bytes. Zero
    encodes as a single zero byte.

    Args:
        i (int): The integer.

    Returns:
        bytes: The encoded integer.
    """
    if i < 0:
        raise UCryptoError("intToBytes: negative integer %d" % i)
    return i.to_bytes(max(1, (i.bit_length() + 7) // 8), byteorder="big")


def intFromBytes(b):
    """
    Decodes a non-negative integer from big-endian bytes.

    Args:
        b (bytes-like): The encoded integer.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b, "big")
