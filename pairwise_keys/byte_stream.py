"""
Deterministic Byte Stream

Builds a reproducible pseudorandom byte sequence from an HMAC key and
initial data by chaining keyed hashes. Round 0 hashes the initial data;
every later round hashes everything produced so far.
"""

import logging
import math
from typing import Optional

from .primitives import Capabilities, default_capabilities, hash_block_bits

logger = logging.getLogger(__name__)


def generate_deterministic_bytes(
    hmac_key: bytes,
    initial_data: bytes,
    target_bits: int,
    *,
    hash_name: str = "sha512",
    capabilities: Optional[Capabilities] = None,
) -> bytes:
    """
    Derive target_bits / 8 bytes by iterative HMAC chaining.

    block_0 = HMAC(hmac_key, initial_data)
    block_i = HMAC(hmac_key, block_0 || ... || block_{i-1})

    The key is the same for every round. If target_bits is not a multiple
    of the hash block size the final block is truncated.

    Args:
        hmac_key: Key for every HMAC round
        initial_data: Data hashed in round 0
        target_bits: Length of the output in bits (positive multiple of 8)
        hash_name: 'sha512' (default) or 'sha256'
        capabilities: Keyed-hash provider (default: cryptography backed)

    Returns:
        bytes: Exactly target_bits // 8 bytes

    Raises:
        TypeError: If hmac_key or initial_data is not bytes
        ValueError: If target_bits is not a positive multiple of 8
    """
    if not isinstance(hmac_key, (bytes, bytearray)):
        raise TypeError("hmac_key must be bytes")
    if not isinstance(initial_data, (bytes, bytearray)):
        raise TypeError("initial_data must be bytes")
    if target_bits <= 0 or target_bits % 8 != 0:
        raise ValueError("target_bits must be a positive multiple of 8")

    capabilities = capabilities or default_capabilities()
    rounds = math.ceil(target_bits / hash_block_bits(hash_name))

    accumulator = bytearray()
    data = bytes(initial_data)
    for _ in range(rounds):
        accumulator += capabilities.hmac(hash_name, bytes(hmac_key), data)
        data = bytes(accumulator)

    logger.debug(f"Derived {target_bits} bits in {rounds} {hash_name} rounds")
    return bytes(accumulator[: target_bits // 8])
