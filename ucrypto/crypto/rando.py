"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Random byte sources. Everything in ucrypto that needs randomness takes a
RandomSource argument, falling back to the system source.
"""

import os
import random
import threading

from ucrypto import UCryptoError


class RandomSource:
    """
    RandomSource is the interface for random byte providers. Subclasses
    implement read.
    """

    def read(self, n):
        """
        Produce n random bytes.

        Args:
            n (int): The number of bytes.

        Returns:
            bytes: The random bytes.
        """
        raise NotImplementedError

    def fill(self, buf, length):
        """
        Write length random bytes into the start of the writable buffer buf.

        Args:
            buf (bytearray or memoryview): The destination buffer.
            length (int): The number of bytes to write.

        Raises:
            UCryptoError: length does not fit buf, or the source produced the
                wrong number of bytes. buf is unchanged.
        """
        if length < 0 or length > len(buf):
            raise UCryptoError(f"cannot fill {length} bytes of a {len(buf)} byte buffer")
        data = self.read(length)
        if len(data) != length:
            raise UCryptoError(f"random source read {len(data)} of {length} bytes")
        buf[:length] = data

    def randBytes(self, n):
        """
        Random bytes as a new object.

        Args:
            n (int): The number of bytes.

        Returns:
            bytearray: The random bytes.
        """
        buf = bytearray(n)
        self.fill(buf, n)
        return buf


class SystemRandomSource(RandomSource):
    """
    The operating system's CSPRNG.
    """

    def read(self, n):
        return os.urandom(n)


class SeededRandomSource(RandomSource):
    """
    A deterministic source for reproducible runs. Not for key material.
    """

    def __init__(self, seed=0):
        self._rand = random.Random(seed)
        self._mtx = threading.Lock()

    def read(self, n):
        with self._mtx:
            return bytes(self._rand.getrandbits(8) for _ in range(n))


systemRandom = SystemRandomSource()


def source(rng=None):
    """
    The source to use when the caller may not have provided one.

    Args:
        rng (RandomSource): Optional. The caller's source.

    Returns:
        RandomSource: rng, or the system source if rng is None.
    """
    if rng is None:
        return systemRandom
    if not isinstance(rng, RandomSource):
        raise UCryptoError(f"expected a RandomSource, got {type(rng).__name__}")
    return rng
