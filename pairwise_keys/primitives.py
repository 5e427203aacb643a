"""
Cryptographic Capabilities for Pairwise Key Derivation

The derivation engine only needs a keyed hash and secp256k1 point
arithmetic. Both are reached through a Capabilities object so that the
engine can be driven by substitute primitives in tests.
"""

import base64
from typing import Dict, Tuple

from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.asymmetric import ec

# secp256k1 group order
SECP256K1_ORDER = int(
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16
)

CURVE_ORDERS: Dict[str, int] = {
    "secp256k1": SECP256K1_ORDER,
}

_HASHES = {
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}

_CURVES = {
    "secp256k1": ec.SECP256K1,
}


def hash_block_bits(hash_name: str) -> int:
    """Output size in bits of a supported hash."""
    try:
        return _HASHES[hash_name].digest_size * 8
    except KeyError:
        raise ValueError(f"Unsupported hash function: {hash_name}")


def curve_for_name(curve_name: str) -> ec.EllipticCurve:
    """Return the cryptography curve object for a canonical curve name."""
    try:
        return _CURVES[curve_name]()
    except KeyError:
        raise ValueError(f"Unsupported curve: {curve_name}")


def int_to_bytes(value: int, length: int = 0) -> bytes:
    """
    Big-endian unsigned encoding of value.

    With length 0 the shortest encoding is used (a single zero byte for 0).
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    if length == 0:
        length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "big")


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    padding = "=" * (-len(text) % 4)
    return base64.urlsafe_b64decode(text + padding)


def b64url_to_int(text: str) -> int:
    return int.from_bytes(b64url_decode(text), "big")


class Capabilities:
    """
    Narrow interface to the primitives the derivation engine consumes.

    Subclasses provide a keyed hash (HMAC) and elliptic-curve arithmetic
    for the canonical curve names in CURVE_ORDERS.
    """

    def hmac(self, hash_name: str, key: bytes, data: bytes) -> bytes:
        """Keyed hash of data; hash_name is 'sha256' or 'sha512'."""
        raise NotImplementedError

    def curve_point(self, curve_name: str, scalar: int) -> Tuple[int, int]:
        """Affine coordinates of scalar * G."""
        raise NotImplementedError

    def validate_key_pair(self, curve_name: str, scalar: int, x: int, y: int) -> None:
        """Raise ValueError unless (x, y) is on the curve and equals scalar * G."""
        raise NotImplementedError


class CryptographyCapabilities(Capabilities):
    """Capabilities backed by the cryptography package."""

    def hmac(self, hash_name: str, key: bytes, data: bytes) -> bytes:
        if hash_name not in _HASHES:
            raise ValueError(f"Unsupported hash function: {hash_name}")
        h = hmac.HMAC(key, _HASHES[hash_name]())
        h.update(data)
        return h.finalize()

    def curve_point(self, curve_name: str, scalar: int) -> Tuple[int, int]:
        private_key = ec.derive_private_key(scalar, curve_for_name(curve_name))
        public_numbers = private_key.public_key().public_numbers()
        return public_numbers.x, public_numbers.y

    def validate_key_pair(self, curve_name: str, scalar: int, x: int, y: int) -> None:
        curve = curve_for_name(curve_name)
        # Loading private numbers checks the point and the scalar/point match
        public_numbers = ec.EllipticCurvePublicNumbers(x, y, curve)
        ec.EllipticCurvePrivateNumbers(scalar, public_numbers).private_key()


_default_capabilities = CryptographyCapabilities()


def default_capabilities() -> Capabilities:
    """Shared stateless default capabilities."""
    return _default_capabilities
