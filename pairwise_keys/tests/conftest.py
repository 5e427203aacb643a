"""
Test Configuration and Fixtures

Provides fixtures for:
- The all-zero master secret used by the reference vectors
- A capabilities object that records every keyed-hash call
"""

from typing import List, Tuple

import pytest

from pairwise_keys.primitives import CryptographyCapabilities


class RecordingCapabilities(CryptographyCapabilities):
    """Real primitives that remember each HMAC call as (hash, key, data)."""

    def __init__(self):
        self.calls: List[Tuple[str, bytes, bytes]] = []

    def hmac(self, hash_name: str, key: bytes, data: bytes) -> bytes:
        self.calls.append((hash_name, key, data))
        return super().hmac(hash_name, key, data)


@pytest.fixture
def zero_master_key() -> bytes:
    """32 zero bytes."""
    return b"\x00" * 32


@pytest.fixture
def recording_capabilities() -> RecordingCapabilities:
    return RecordingCapabilities()
