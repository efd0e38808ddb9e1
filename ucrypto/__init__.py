"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details
"""


class UCryptoError(Exception):
    pass


class InvalidArgumentTypeError(UCryptoError):
    """
    An argument was not of the type the operation accepts. index is the
    1-based position of the offending argument.
    """

    def __init__(self, index, expected, found):
        self.index = index
        self.expected = expected
        self.found = found
        super().__init__(
            "arg at index %d expected a %s, but %s found" % (index, expected, found)
        )


class InvalidModulusError(UCryptoError):
    """A modulus the chosen algorithm cannot work with."""

    pass


class InvalidHexError(UCryptoError):
    """Hex input could not be decoded."""

    pass


class OddLengthHexError(InvalidHexError):
    def __init__(self, msg="odd-length string"):
        super().__init__(msg)


class NonHexDigitError(InvalidHexError):
    def __init__(self, msg="non-hex digit found"):
        super().__init__(msg)


class OutOfRangeError(UCryptoError):
    """A numeric parameter is outside its permitted range."""

    pass


class NoModularInverseError(UCryptoError):
    """The value shares a factor with the modulus."""

    pass


class AllocationFailureError(UCryptoError):
    """
    A value would exceed the integer capacity. size is the number of bytes the
    value would have needed.
    """

    def __init__(self, size):
        self.size = size
        super().__init__("memory allocation failed, allocating %u bytes" % size)


class MismatchedCurveError(UCryptoError):
    def __init__(self, msg="curve of two Point's must be the same"):
        super().__init__(msg)


class InvalidCurveError(UCryptoError):
    """Curve parameters that do not describe a usable curve."""

    pass


class PrimeGenerationError(UCryptoError):
    """Prime search gave up after the configured number of attempts."""

    pass
