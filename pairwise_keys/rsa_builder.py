"""
RSA Pairwise Key Builder

Derives two primes from chained deterministic byte streams and assembles
the full set of RSA private key components.

The seed for p is keyed with the master secret; the seed for q is keyed
with p's seed bytes, so q can only be reproduced by someone who can
reproduce p.
"""

import logging
from typing import Optional, Tuple

from .byte_stream import generate_deterministic_bytes
from .config import get_settings
from .errors import KeyComputationError, ModularInverseError
from .models import RSA_PUBLIC_EXPONENT, RsaKeyMaterial
from .prime_search import search_prime
from .primitives import Capabilities

logger = logging.getLogger(__name__)


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Computes gcd(a, b) and coefficients x, y such that ax + by = gcd(a, b).
    Iterative, so operand size does not affect stack depth.

    Example:
        >>> gcd, x, y = extended_gcd(35, 15)
        >>> assert gcd == 5
        >>> assert 35 * x + 15 * y == 5
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_r, old_x, old_y


def modular_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a modulo m.

    Args:
        a: Number to find inverse for
        m: Modulus

    Returns:
        Optional[int]: x with (a * x) % m == 1, or None if gcd(a, m) != 1

    Raises:
        ValueError: If a or m is not positive
    """
    if a <= 0 or m <= 0:
        raise ValueError("Both a and m must be positive")

    a = a % m
    if a == 0:
        return None

    gcd, x, _ = extended_gcd(a, m)
    if gcd != 1:
        return None

    return x % m


def compute_phi_n(p: int, q: int) -> int:
    """Euler's totient φ(N) = (p - 1) * (q - 1) for N = p * q."""
    if p <= 1 or q <= 1:
        raise ValueError("Both p and q must be greater than 1")
    if p == q:
        raise KeyComputationError("p and q must be distinct")
    return (p - 1) * (q - 1)


def assemble_rsa_components(p: int, q: int, e: int = RSA_PUBLIC_EXPONENT) -> dict:
    """
    Compute n, d and the CRT parameters from two distinct primes.

    Raises:
        KeyComputationError: If p == q
        ModularInverseError: If e has no inverse mod φ(N) or q none mod p
    """
    phi = compute_phi_n(p, q)

    d = modular_inverse(e, phi)
    if d is None:
        raise ModularInverseError(f"Public exponent {e} is not invertible mod φ(N)")

    qi = modular_inverse(q, p)
    if qi is None:
        raise ModularInverseError("q is not invertible mod p")

    return {
        "n": p * q,
        "e": e,
        "d": d,
        "p": p,
        "q": q,
        "dp": d % (p - 1),
        "dq": d % (q - 1),
        "qi": qi,
    }


def build_rsa_key_material(
    master_secret: bytes,
    peer_id: str,
    modulus_bits: Optional[int] = None,
    *,
    capabilities: Optional[Capabilities] = None,
) -> RsaKeyMaterial:
    """
    Derive the RSA key material for (master_secret, peer_id).

    pBase = stream(key=master_secret, data=peer_id, bits=modulus_bits/2)
    qBase = stream(key=pBase, data=peer_id, bits=modulus_bits/2)

    Each base is turned into a prime with search_prime.

    Args:
        master_secret: The identity's master secret
        peer_id: Peer identifier the key is bound to
        modulus_bits: RSA modulus length (default: settings.default_modulus_bits)
        capabilities: Keyed-hash provider (default: cryptography backed)

    Returns:
        RsaKeyMaterial: Components plus the number of prime tests per prime

    Raises:
        ValueError: If modulus_bits is too small or not a multiple of 16
        KeyComputationError: If the primes coincide
        ModularInverseError: If e is not invertible mod φ(N)
        PrimeSearchExhaustedError: If a prime search hits its cap
    """
    settings = get_settings()
    if modulus_bits is None:
        modulus_bits = settings.default_modulus_bits
    if modulus_bits < settings.min_modulus_bits:
        raise ValueError(f"modulus_bits must be at least {settings.min_modulus_bits}")
    if modulus_bits % 16 != 0:
        raise ValueError("modulus_bits must be a multiple of 16")

    prime_bits = modulus_bits // 2
    peer_bytes = peer_id.encode("utf-8")

    p_base = generate_deterministic_bytes(
        master_secret, peer_bytes, prime_bits, capabilities=capabilities
    )
    q_base = generate_deterministic_bytes(
        p_base, peer_bytes, prime_bits, capabilities=capabilities
    )

    p, p_tests = search_prime(
        p_base, mr_rounds=settings.mr_rounds, max_attempts=settings.max_prime_attempts
    )
    q, q_tests = search_prime(
        q_base, mr_rounds=settings.mr_rounds, max_attempts=settings.max_prime_attempts
    )
    logger.debug(f"RSA-{modulus_bits} primes found: p after {p_tests} tests, q after {q_tests} tests")

    components = assemble_rsa_components(p, q)
    return RsaKeyMaterial(p_tests=p_tests, q_tests=q_tests, **components)
