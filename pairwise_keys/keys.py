"""
Derived Key Object

Wraps the JWK produced by a pairwise derivation and delegates signing and
verification to the cryptography package. The private key object is
rebuilt from the JWK numbers on demand and not retained.
"""

import logging
from typing import Dict, Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from .ec_builder import resolve_curve
from .errors import KeyNotExportableError
from .models import AlgorithmParams, KeyType, KeyUse
from .primitives import b64url_to_int, curve_for_name

logger = logging.getLogger(__name__)

PRIVATE_JWK_FIELDS = ("d", "p", "q", "dp", "dq", "qi")

PrivateKey = Union[rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey]
PublicKey = Union[rsa.RSAPublicKey, ec.EllipticCurvePublicKey]


class DerivedKey:
    """A derived pairwise key in JWK form."""

    def __init__(self, jwk: Dict[str, str], algorithm: Optional[AlgorithmParams] = None, exportable: bool = True):
        self._jwk = dict(jwk)
        self._algorithm = algorithm or AlgorithmParams()
        self._exportable = exportable

    @property
    def kty(self) -> KeyType:
        return KeyType(self._jwk["kty"])

    @property
    def use(self) -> KeyUse:
        return KeyUse(self._jwk["use"])

    @property
    def algorithm(self) -> AlgorithmParams:
        return self._algorithm

    @property
    def exportable(self) -> bool:
        return self._exportable

    def to_jwk(self, private: bool = True) -> Dict[str, str]:
        """
        Export the key as a JWK dict.

        Raises:
            KeyNotExportableError: If private export is requested for a
                key created with exportable=False
        """
        if not private:
            return self.public_jwk()
        if not self._exportable:
            raise KeyNotExportableError("Private key material is not exportable")
        return dict(self._jwk)

    def public_jwk(self) -> Dict[str, str]:
        return {k: v for k, v in self._jwk.items() if k not in PRIVATE_JWK_FIELDS}

    def private_key(self) -> PrivateKey:
        """Rebuild the cryptography private key from the JWK numbers."""
        jwk = self._jwk
        if self.kty == KeyType.RSA:
            public_numbers = rsa.RSAPublicNumbers(b64url_to_int(jwk["e"]), b64url_to_int(jwk["n"]))
            return rsa.RSAPrivateNumbers(
                p=b64url_to_int(jwk["p"]),
                q=b64url_to_int(jwk["q"]),
                d=b64url_to_int(jwk["d"]),
                dmp1=b64url_to_int(jwk["dp"]),
                dmq1=b64url_to_int(jwk["dq"]),
                iqmp=b64url_to_int(jwk["qi"]),
                public_numbers=public_numbers,
            ).private_key()

        curve = curve_for_name(resolve_curve(jwk["crv"]))
        return ec.derive_private_key(b64url_to_int(jwk["d"]), curve)

    def public_key(self) -> PublicKey:
        jwk = self._jwk
        if self.kty == KeyType.RSA:
            return rsa.RSAPublicNumbers(b64url_to_int(jwk["e"]), b64url_to_int(jwk["n"])).public_key()

        curve = curve_for_name(resolve_curve(jwk["crv"]))
        return ec.EllipticCurvePublicNumbers(
            b64url_to_int(jwk["x"]), b64url_to_int(jwk["y"]), curve
        ).public_key()

    def public_key_pem(self) -> str:
        return self.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        ).decode()

    def sign(self, data: bytes) -> bytes:
        """Sign data with RSASSA-PKCS1-v1_5 or ECDSA, both over SHA-256."""
        private_key = self.private_key()
        if self.kty == KeyType.RSA:
            return private_key.sign(data, padding.PKCS1v15(), hashes.SHA256())
        return private_key.sign(data, ec.ECDSA(hashes.SHA256()))

    def verify(self, signature: bytes, data: bytes) -> bool:
        """
        Verify a signature produced by sign().

        Returns:
            bool: True if signature is valid
        """
        public_key = self.public_key()
        try:
            if self.kty == KeyType.RSA:
                public_key.verify(signature, data, padding.PKCS1v15(), hashes.SHA256())
            else:
                public_key.verify(signature, data, ec.ECDSA(hashes.SHA256()))
            return True
        except InvalidSignature:
            logger.debug("Signature verification failed")
            return False

    def __repr__(self) -> str:
        return f"DerivedKey(kty={self.kty.value}, use={self.use.value}, exportable={self._exportable})"
