"""
Hashing Unit Tests
Tests for proofgen/crypto/hashing.py
"""
import hashlib

from proofgen.crypto.hashing import (
    sha256,
    hash_canonical,
    hash_concat,
    to_hex,
)


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        result = sha256(b"hello")

        assert result == hashlib.sha256(b"hello").digest()
        assert len(result) == 32

    def test_sha256_different_inputs_different_outputs(self):
        assert sha256(b"input1") != sha256(b"input2")


class TestHashCanonical:
    """Tests for hash_canonical()."""

    def test_key_order_does_not_matter(self):
        a = hash_canonical({"key": b"k", "value_hash": b"v"})
        b = hash_canonical({"value_hash": b"v", "key": b"k"})

        assert a == b

    def test_matches_manual_canonical_json(self):
        expected = hashlib.sha256(b'{"key":"6b","value_hash":"76"}').digest()

        assert hash_canonical({"key": b"k", "value_hash": b"v"}) == expected


class TestHelpers:
    """Tests for hash_concat() and to_hex()."""

    def test_hash_concat_equals_sha256_of_concat(self):
        assert hash_concat(b"left", b"right") == sha256(b"leftright")

    def test_hash_concat_order_matters(self):
        assert hash_concat(b"a", b"b") != hash_concat(b"b", b"a")

    def test_to_hex_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"
        assert to_hex(b"") == "0x"
