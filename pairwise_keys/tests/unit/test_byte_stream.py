"""
Unit Tests for Deterministic Byte Stream Module

Tests HMAC chaining against an independent hmac/hashlib computation.
"""

import hashlib
import hmac

import pytest

from pairwise_keys.byte_stream import generate_deterministic_bytes


def _reference_stream(key: bytes, data: bytes, rounds: int) -> bytes:
    accumulated = b""
    for i in range(rounds):
        accumulated += hmac.new(key, data if i == 0 else accumulated, hashlib.sha512).digest()
    return accumulated


class TestDeterministicBytes:
    """Test deterministic byte stream generation."""

    def test_output_length(self):
        """Output is exactly target_bits / 8 bytes."""
        for bits in (512, 1024, 1536, 2048):
            assert len(generate_deterministic_bytes(b"key", b"peer", bits)) == bits // 8

    def test_single_round_is_plain_hmac(self):
        """One round is HMAC-SHA512(key, initial_data)."""
        out = generate_deterministic_bytes(b"master", b"peer1", 512)
        assert out == hmac.new(b"master", b"peer1", hashlib.sha512).digest()

    def test_chaining_hashes_whole_accumulator(self):
        """Round i hashes all previous blocks, not only the last one."""
        out = generate_deterministic_bytes(b"master", b"peer1", 1536)
        assert out == _reference_stream(b"master", b"peer1", 3)

        # Hashing only the previous block would give a different third block
        block0 = hmac.new(b"master", b"peer1", hashlib.sha512).digest()
        block1 = hmac.new(b"master", block0, hashlib.sha512).digest()
        wrong_block2 = hmac.new(b"master", block1, hashlib.sha512).digest()
        assert out[128:] != wrong_block2

    def test_key_is_constant_across_rounds(self, recording_capabilities):
        """Every round uses the same key; data grows by one block per round."""
        generate_deterministic_bytes(
            b"master", b"peer1", 1536, capabilities=recording_capabilities
        )

        calls = recording_capabilities.calls
        assert len(calls) == 3
        assert all(name == "sha512" for name, _, _ in calls)
        assert all(key == b"master" for _, key, _ in calls)
        assert calls[0][2] == b"peer1"
        assert len(calls[1][2]) == 64
        assert len(calls[2][2]) == 128

    def test_deterministic(self):
        """Same inputs give the same bytes."""
        a = generate_deterministic_bytes(b"\x00" * 32, b"peer", 1024)
        b = generate_deterministic_bytes(b"\x00" * 32, b"peer", 1024)
        assert a == b

    def test_different_inputs_differ(self):
        """Changing either the key or the data changes the output."""
        base = generate_deterministic_bytes(b"key-a", b"peer", 1024)
        assert generate_deterministic_bytes(b"key-b", b"peer", 1024) != base
        assert generate_deterministic_bytes(b"key-a", b"other", 1024) != base

    def test_partial_block_is_truncated(self):
        """A length that is not a multiple of 512 bits truncates the last block."""
        short = generate_deterministic_bytes(b"key", b"peer", 384)
        full = generate_deterministic_bytes(b"key", b"peer", 512)
        assert len(short) == 48
        assert short == full[:48]

    def test_sha256_variant(self):
        """sha256 produces 256-bit blocks."""
        out = generate_deterministic_bytes(b"key", b"peer", 512, hash_name="sha256")
        block0 = hmac.new(b"key", b"peer", hashlib.sha256).digest()
        block1 = hmac.new(b"key", block0, hashlib.sha256).digest()
        assert out == block0 + block1

    def test_invalid_target_bits(self):
        """Non-positive or non byte-aligned lengths are rejected."""
        for bits in (0, -512, 12):
            with pytest.raises(ValueError, match="positive multiple of 8"):
                generate_deterministic_bytes(b"key", b"peer", bits)

    def test_type_validation(self):
        """Key and data must be bytes."""
        with pytest.raises(TypeError, match="hmac_key must be bytes"):
            generate_deterministic_bytes("key", b"peer", 512)

        with pytest.raises(TypeError, match="initial_data must be bytes"):
            generate_deterministic_bytes(b"key", "peer", 512)

    def test_unsupported_hash(self):
        with pytest.raises(ValueError, match="Unsupported hash function"):
            generate_deterministic_bytes(b"key", b"peer", 512, hash_name="md5")
