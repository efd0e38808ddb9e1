"""
Copyright (c) 2020, the ucrypto developers
See LICENSE for details

Primality testing and random prime generation.
"""

from ucrypto import OutOfRangeError, PrimeGenerationError
from ucrypto import config
from ucrypto.crypto import rando
from ucrypto.crypto.bignum import checkInt, countBits
from ucrypto.crypto.number import MontgomeryContext
from ucrypto.util import helpers
from ucrypto.util.encode import intFromBytes


log = helpers.getLogger("PRIME")

MinPrimeBits = 16
MaxPrimeBits = 4096

# Number of small primes used for trial division, and the upper bound on
# Miller-Rabin rounds, since the rounds use the small primes as bases.
PRIME_SIZE = 256


def _firstPrimes(n):
    primes = []
    c = 2
    while len(primes) < n:
        if all(c % p for p in primes if p * p <= c):
            primes.append(c)
        c += 1
    return primes


PRIMES = tuple(_firstPrimes(PRIME_SIZE))


def millerRabin(n, base, ctx=None):
    """
    One Miller-Rabin round.

    Args:
        n (int): An odd integer > 3.
        base (int): The witness candidate, 1 < base < n - 1.
        ctx (MontgomeryContext): Optional. A context for n, reused between
            rounds.

    Returns:
        bool: False if base proves n composite, else True.
    """
    ctx = ctx or MontgomeryContext(n)
    d = n - 1
    s = 0
    while d % 2 == 0:
        d >>= 1
        s += 1
    x = ctx.pow(base, d)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = (x * x) % n
        if x == n - 1:
            return True
        if x == 1:
            return False
    return False


def isPrime(n, rounds=None):
    """
    Probabilistic primality test. Trial division by the first PRIME_SIZE
    primes, followed by rounds of Miller-Rabin using the first rounds primes
    as bases.

    Args:
        n (int): The candidate.
        rounds (int): Optional. Miller-Rabin rounds, 1 to PRIME_SIZE. Defaults
            to the configured primeRounds.

    Returns:
        bool: True if n is probably prime.

    Raises:
        OutOfRangeError: rounds is outside 1 to PRIME_SIZE.
    """
    checkInt(n, 1)
    if rounds is None:
        rounds = config.load().primeRounds
    checkInt(rounds, 2)
    if rounds < 1 or rounds > PRIME_SIZE:
        raise OutOfRangeError(
            "number of rounds must be in range 1-%d, not %d" % (PRIME_SIZE, rounds)
        )
    if n < 2:
        return False
    for p in PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    ctx = MontgomeryContext(n)
    return all(millerRabin(n, b, ctx) for b in PRIMES[:rounds])


def generatePrime(bits=None, rounds=None, safe=False, rng=None):
    """
    Generate a random prime of exactly bits bits.

    A random byte decides whether the second most significant bit is forced
    on or off. The top bit and the low bit are always set. A safe prime p is
    one where (p - 1) / 2 is also prime, and it is generated with p = 3 mod 4.

    Args:
        bits (int): Optional. The prime size, 16 to 4096. Defaults to the
            configured primeBits.
        rounds (int): Optional. Miller-Rabin rounds for each test.
        safe (bool): Generate a safe prime.
        rng (RandomSource): Optional. The random source. Defaults to the
            system source.

    Returns:
        int: The prime.

    Raises:
        OutOfRangeError: bits is out of range.
        PrimeGenerationError: No prime was found within the configured
            number of attempts.
    """
    cfg = config.load()
    if bits is None:
        bits = cfg.primeBits
    checkInt(bits, 1)
    if bits < MinPrimeBits or bits > MaxPrimeBits:
        raise OutOfRangeError(
            "number of bits to generate must be in range %d-%d, not %d bits"
            % (MinPrimeBits, MaxPrimeBits, bits)
        )
    if rounds is None:
        rounds = cfg.primeRounds
    rng = rando.source(rng)

    secondBitOn = rng.randBytes(1)[0] & 1
    byteLen = (bits + 7) // 8
    topMask = (1 << bits) - 1
    lowBits = 3 if safe else 1

    for attempt in range(1, cfg.primeAttempts + 1):
        p = intFromBytes(rng.randBytes(byteLen)) & topMask
        p |= 1 << (bits - 1)
        if secondBitOn:
            p |= 1 << (bits - 2)
        else:
            p &= ~(1 << (bits - 2))
        p |= lowBits
        if not isPrime(p, rounds):
            continue
        if safe and not isPrime((p - 1) // 2, rounds):
            continue
        log.debug(f"found {bits}-bit {'safe ' if safe else ''}prime after {attempt} attempts")
        break
    else:
        raise PrimeGenerationError(
            "no %d-bit prime found in %d attempts" % (bits, cfg.primeAttempts)
        )

    if countBits(p) != bits:
        raise OutOfRangeError("Prime is %d, not %d bits" % (countBits(p), bits))
    return p
