"""
Error Types for Pairwise Key Derivation

All derivation failures derive from PairwiseKeyError, which is a ValueError
so callers that already guard numeric input with ValueError keep working.
"""


class PairwiseKeyError(ValueError):
    """Base class for pairwise key derivation failures."""


class UnsupportedKeyTypeError(PairwiseKeyError):
    """Raised when a key type other than EC or RSA is requested."""

    def __init__(self, key_type):
        self.key_type = key_type
        super().__init__(f"Pairwise key for key type {key_type} is not supported")


class UnsupportedCurveError(PairwiseKeyError):
    """Raised when the named curve is not one of the secp256k1 aliases."""

    def __init__(self, curve):
        self.curve = curve
        super().__init__(f"Curve {curve} is not supported")


class KeyComputationError(PairwiseKeyError):
    """Raised when RSA key components cannot be assembled."""


class ModularInverseError(KeyComputationError):
    """Raised when a required modular inverse does not exist."""


class InvalidKeyPairError(PairwiseKeyError):
    """Raised when a derived EC key pair fails curve validation."""


class PrimeSearchExhaustedError(PairwiseKeyError):
    """Raised when the prime search reaches its attempt cap."""


class KeyNotExportableError(PairwiseKeyError):
    """Raised when private material of a non-exportable key is requested."""
