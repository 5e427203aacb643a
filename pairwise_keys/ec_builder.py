"""
Elliptic-Curve Pairwise Key Builder

The private scalar is a single HMAC-SHA256 of the peer id under the master
secret, reduced modulo the curve order. One SHA-256 output already has
the 256 bits secp256k1 needs, so no chaining is done here.
"""

import logging
from typing import Optional

from .errors import InvalidKeyPairError, UnsupportedCurveError
from .models import EcKeyMaterial
from .primitives import CURVE_ORDERS, Capabilities, default_capabilities

logger = logging.getLogger(__name__)

# Accepted JWK curve names and the curve each one denotes
SUPPORTED_CURVES = {
    "K-256": "secp256k1",
    "P-256K": "secp256k1",
}


def resolve_curve(curve_name: str) -> str:
    """Map a JWK curve name to its canonical curve, or raise UnsupportedCurveError."""
    try:
        return SUPPORTED_CURVES[curve_name]
    except (KeyError, TypeError):
        raise UnsupportedCurveError(curve_name)


def derive_private_scalar(seed: bytes, curve: str) -> int:
    """
    Interpret seed as an unsigned big-endian integer reduced mod the curve order.

    Raises:
        InvalidKeyPairError: If the reduced scalar is zero
    """
    scalar = int.from_bytes(seed, "big") % CURVE_ORDERS[curve]
    if scalar == 0:
        raise InvalidKeyPairError("Derived private scalar is zero")
    return scalar


def build_ec_key_material(
    master_secret: bytes,
    peer_id: str,
    curve_name: str,
    *,
    capabilities: Optional[Capabilities] = None,
) -> EcKeyMaterial:
    """
    Derive the EC key material for (master_secret, peer_id) on curve_name.

    Args:
        master_secret: The identity's master secret
        peer_id: Peer identifier the key is bound to
        curve_name: 'K-256' or 'P-256K'
        capabilities: Keyed-hash and curve provider (default: cryptography backed)

    Returns:
        EcKeyMaterial: Validated scalar and public point

    Raises:
        UnsupportedCurveError: If curve_name is not a secp256k1 alias
        InvalidKeyPairError: If the pair fails curve validation
    """
    curve = resolve_curve(curve_name)
    capabilities = capabilities or default_capabilities()

    seed = capabilities.hmac("sha256", master_secret, peer_id.encode("utf-8"))
    d = derive_private_scalar(seed, curve)

    try:
        x, y = capabilities.curve_point(curve, d)
        capabilities.validate_key_pair(curve, d, x, y)
    except ValueError as e:
        raise InvalidKeyPairError(f"Derived {curve_name} key pair failed validation: {e}") from e

    logger.debug(f"Derived {curve_name} key pair")
    return EcKeyMaterial(curve=curve_name, d=d, x=x, y=y)
