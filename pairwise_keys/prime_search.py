"""
Deterministic Prime Search

Turns a fixed-length deterministic seed into a probable prime of exactly
the seed's bit length. The seed's top and bottom bits are forced on, then
odd candidates are tested upward with Miller-Rabin.
"""

import hashlib
import logging
from typing import Optional, Tuple

from .errors import PrimeSearchExhaustedError

logger = logging.getLogger(__name__)

DEFAULT_MR_ROUNDS = 64
DEFAULT_MAX_ATTEMPTS = 100_000

_SMALL_PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


def is_probable_prime(n: int, rounds: int = DEFAULT_MR_ROUNDS) -> bool:
    """
    Miller-Rabin primality test with deterministic witnesses.

    Witnesses are derived from SHA-256 of the candidate, so the result for
    a given (n, rounds) never changes between runs.
    """
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    seed = n.to_bytes((n.bit_length() + 7) // 8, "big")
    for i in range(rounds):
        h = hashlib.sha256(seed + i.to_bytes(4, "big")).digest()
        a = 2 + (int.from_bytes(h, "big") % (n - 3))
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def prime_candidate(seed: bytes) -> int:
    """
    Shape a seed into the first prime candidate.

    The most significant bit of the first byte and the least significant
    bit of the last byte are set, giving an odd integer of exactly
    8 * len(seed) bits. The seed itself is not modified.
    """
    shaped = bytearray(seed)
    shaped[0] |= 0x80
    shaped[-1] |= 0x01
    return int.from_bytes(shaped, "big")


def search_prime(
    seed: bytes,
    *,
    mr_rounds: int = DEFAULT_MR_ROUNDS,
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
) -> Tuple[int, int]:
    """
    Find the first probable prime at or above the shaped seed.

    Args:
        seed: Deterministic seed bytes; its length fixes the prime size
        mr_rounds: Miller-Rabin rounds per candidate (default: 64)
        max_attempts: Candidates to test before giving up, None for no cap
            (default: 100_000)

    Returns:
        Tuple[int, int]: (prime, test_count) where test_count is the number
        of candidates tested, the accepted one included

    Raises:
        TypeError: If seed is not bytes
        ValueError: If seed is empty or max_attempts is not positive
        PrimeSearchExhaustedError: If no prime is found within max_attempts

    Example:
        >>> prime, tests = search_prime(b"\\x00" * 8)
        >>> assert prime.bit_length() == 64 and prime % 2 == 1
    """
    if not isinstance(seed, (bytes, bytearray)):
        raise TypeError("seed must be bytes")
    if not seed:
        raise ValueError("seed cannot be empty")
    if max_attempts is not None and max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    candidate = prime_candidate(seed)
    tests = 1
    while True:
        if is_probable_prime(candidate, mr_rounds):
            logger.debug(f"Found {candidate.bit_length()}-bit prime after {tests} tests")
            return candidate, tests
        if max_attempts is not None and tests >= max_attempts:
            raise PrimeSearchExhaustedError(
                f"Could not find prime within {max_attempts} attempts"
            )
        candidate += 2
        tests += 1
