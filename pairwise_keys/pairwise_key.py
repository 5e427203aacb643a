"""
Pairwise Key

A key pair bound to one (DID, peer) relationship. It is regenerated from
the DID's master secret and the peer id whenever it is needed and is never
stored on its own.
"""

import logging
from typing import Dict, Optional, Union

from .ec_builder import build_ec_key_material
from .errors import UnsupportedKeyTypeError
from .keys import DerivedKey
from .models import AlgorithmParams, KeyType, KeyUse
from .primitives import Capabilities
from .rsa_builder import build_rsa_key_material

logger = logging.getLogger(__name__)


def _resolve_key_type(key_type: Union[KeyType, str]) -> KeyType:
    if isinstance(key_type, KeyType):
        return key_type
    if isinstance(key_type, str):
        try:
            return KeyType(key_type.upper())
        except ValueError:
            pass
    raise UnsupportedKeyTypeError(key_type)


def _resolve_algorithm(algorithm: Union[AlgorithmParams, Dict, None]) -> AlgorithmParams:
    if algorithm is None:
        return AlgorithmParams()
    if isinstance(algorithm, AlgorithmParams):
        return algorithm
    return AlgorithmParams.from_dict(algorithm)


class PairwiseKey:
    """Pairwise key for a DID and a peer."""

    def __init__(self, did: str, peer_id: str):
        self._id = f"{did}-{peer_id}"
        self._peer_id = peer_id
        self._key: Optional[DerivedKey] = None
        self._prime_tests = 0

    @property
    def id(self) -> str:
        return self._id

    @property
    def peer_id(self) -> str:
        return self._peer_id

    @property
    def key(self) -> Optional[DerivedKey]:
        """The derived key, or None before a successful generate()."""
        return self._key

    @property
    def prime_tests(self) -> int:
        """Primality tests spent finding q in the last RSA derivation (0 for EC)."""
        return self._prime_tests

    def generate(
        self,
        master_key: bytes,
        capabilities: Optional[Capabilities],
        algorithm: Union[AlgorithmParams, Dict, None],
        key_type: Union[KeyType, str],
        key_use: KeyUse = KeyUse.SIGNATURE,
        exportable: bool = True,
    ) -> DerivedKey:
        """
        Derive the pairwise key.

        Args:
            master_key: The DID's master secret
            capabilities: Keyed-hash and curve provider, None for the default
            algorithm: AlgorithmParams or a dict with modulusLength / namedCurve
            key_type: KeyType.EC or KeyType.RSA
            key_use: Intended key use (default: signature)
            exportable: Whether private material may be exported from the key

        Returns:
            DerivedKey: The derived key, also available as self.key

        Raises:
            UnsupportedKeyTypeError: If key_type is not EC or RSA
            UnsupportedCurveError: If an EC curve other than K-256/P-256K is named
            InvalidKeyPairError: If the EC pair fails validation
            ModularInverseError: If RSA assembly cannot invert e
            TypeError: If master_key is not bytes
            ValueError: If master_key is empty
        """
        self._key = None
        self._prime_tests = 0

        resolved_type = _resolve_key_type(key_type)
        key_use = KeyUse(key_use)
        params = _resolve_algorithm(algorithm)

        if not isinstance(master_key, (bytes, bytearray)):
            raise TypeError("master_key must be bytes")
        if not master_key:
            raise ValueError("master_key cannot be empty")
        master_key = bytes(master_key)

        log_extra = {"pairwise_id": self._id}
        if resolved_type == KeyType.RSA:
            material = build_rsa_key_material(
                master_key, self._peer_id, params.modulus_length, capabilities=capabilities
            )
            prime_tests = material.q_tests
            logger.info(
                f"Generated RSA pairwise key with {material.n.bit_length()}-bit modulus "
                f"after {material.p_tests} + {material.q_tests} prime tests",
                extra=log_extra,
            )
        else:
            material = build_ec_key_material(
                master_key, self._peer_id, params.named_curve, capabilities=capabilities
            )
            prime_tests = 0
            logger.info(f"Generated EC pairwise key on {material.curve}", extra=log_extra)

        self._key = DerivedKey(material.to_jwk(key_use), params, exportable)
        self._prime_tests = prime_tests
        return self._key

    def __repr__(self) -> str:
        return f"PairwiseKey(id={self._id!r})"
