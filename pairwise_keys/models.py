"""
Pydantic Models for Pairwise Key Derivation

Key types, key usage, algorithm parameters and the derived key material
records. Material records are frozen; they are created per derivation and
never cached.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .primitives import b64url_encode, int_to_bytes

RSA_PUBLIC_EXPONENT = 65537
EC_COORDINATE_BYTES = 32


class KeyType(str, Enum):
    """JWK key types supported for pairwise derivation."""
    EC = "EC"
    RSA = "RSA"


class KeyUse(str, Enum):
    """JWK public key use."""
    SIGNATURE = "sig"
    ENCRYPTION = "enc"


class AlgorithmParams(BaseModel):
    """
    Algorithm parameters for a derivation.

    Accepts WebCrypto-style field names (modulusLength, namedCurve) as well
    as the Python names.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = Field(default=None, description="Algorithm name, e.g. ECDSA or RSASSA-PKCS1-v1_5")
    modulus_length: Optional[int] = Field(default=None, alias="modulusLength", gt=0)
    named_curve: Optional[str] = Field(default=None, alias="namedCurve")

    @field_validator('named_curve')
    @classmethod
    def validate_named_curve(cls, v):
        if v is not None and not v.strip():
            raise ValueError('namedCurve cannot be empty')
        return v

    @classmethod
    def from_dict(cls, params: Dict) -> "AlgorithmParams":
        return cls.model_validate(params)


class RsaKeyMaterial(BaseModel):
    """RSA private key components with per-prime search diagnostics."""
    model_config = ConfigDict(frozen=True)

    n: int
    e: int = RSA_PUBLIC_EXPONENT
    d: int
    p: int
    q: int
    dp: int
    dq: int
    qi: int
    p_tests: int = Field(default=0, description="Primality tests spent finding p")
    q_tests: int = Field(default=0, description="Primality tests spent finding q")

    def to_jwk(self, key_use: KeyUse) -> Dict[str, str]:
        """Private JWK with minimal big-endian base64url integers."""
        jwk = {"kty": KeyType.RSA.value, "use": KeyUse(key_use).value}
        for field in ("e", "n", "d", "p", "q", "dp", "dq", "qi"):
            jwk[field] = b64url_encode(int_to_bytes(getattr(self, field)))
        return jwk


class EcKeyMaterial(BaseModel):
    """Elliptic-curve private scalar and public point."""
    model_config = ConfigDict(frozen=True)

    curve: str = Field(..., description="Curve name as requested, e.g. K-256")
    d: int
    x: int
    y: int

    def to_jwk(self, key_use: KeyUse) -> Dict[str, str]:
        """Private JWK with fixed 32-byte big-endian base64url fields."""
        return {
            "kty": KeyType.EC.value,
            "use": KeyUse(key_use).value,
            "crv": self.curve,
            "d": b64url_encode(int_to_bytes(self.d, EC_COORDINATE_BYTES)),
            "x": b64url_encode(int_to_bytes(self.x, EC_COORDINATE_BYTES)),
            "y": b64url_encode(int_to_bytes(self.y, EC_COORDINATE_BYTES)),
        }
