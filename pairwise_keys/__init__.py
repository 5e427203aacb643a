"""
Pairwise Key Derivation Package

Deterministically derives RSA and secp256k1 key pairs that are unique to a
(DID master secret, peer id) pair. Keys are never stored; they are derived
again from the same inputs whenever they are needed.
"""

from .byte_stream import generate_deterministic_bytes
from .ec_builder import build_ec_key_material
from .errors import (
    InvalidKeyPairError,
    KeyComputationError,
    KeyNotExportableError,
    ModularInverseError,
    PairwiseKeyError,
    PrimeSearchExhaustedError,
    UnsupportedCurveError,
    UnsupportedKeyTypeError,
)
from .keys import DerivedKey
from .logging_config import setup_logging
from .models import AlgorithmParams, EcKeyMaterial, KeyType, KeyUse, RsaKeyMaterial
from .pairwise_key import PairwiseKey
from .prime_search import is_probable_prime, search_prime
from .primitives import Capabilities, CryptographyCapabilities
from .rsa_builder import build_rsa_key_material

__version__ = "0.1.0"
__all__ = [
    "PairwiseKey",
    "DerivedKey",
    "AlgorithmParams",
    "KeyType",
    "KeyUse",
    "RsaKeyMaterial",
    "EcKeyMaterial",
    "Capabilities",
    "CryptographyCapabilities",
    "generate_deterministic_bytes",
    "search_prime",
    "is_probable_prime",
    "build_rsa_key_material",
    "build_ec_key_material",
    "PairwiseKeyError",
    "UnsupportedKeyTypeError",
    "UnsupportedCurveError",
    "KeyComputationError",
    "ModularInverseError",
    "InvalidKeyPairError",
    "PrimeSearchExhaustedError",
    "KeyNotExportableError",
    "setup_logging",
]
