"""
Hashing Utilities
Raw and canonical hashing for Merkle store leaves and inner nodes.

This module provides:
- SHA-256 hashing for raw bytes
- Canonical hashing for structured leaf records (via dumps_canonical)
- Hex rendering with 0x prefix for logs and error details

Determinism Notes:
- Raw bytes are hashed exactly as given
- Structured records are serialized canonically first, so dict ordering
  never changes a digest
"""
from __future__ import annotations

import hashlib
from typing import Any

from proofgen.schemas.canonical import dumps_canonical


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_canonical(obj: Any) -> bytes:
    """
    Hash an object using canonical JSON serialization.

    This is how the Merkle store computes a leaf hash from a
    ``{"key": ..., "value_hash": ...}`` record. Byte fields are rendered
    as hex by the canonicalizer.

    Rule: leaf = sha256(dumps_canonical(obj).encode("utf-8"))

    Args:
        obj: Any object that can be canonically serialized

    Returns:
        32-byte SHA-256 digest of the canonical JSON

    Raises:
        CanonicalizationException: If object cannot be canonically serialized
    """
    canonical_json = dumps_canonical(obj)
    return sha256(canonical_json.encode("utf-8"))


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    Used for Merkle parent hashes: parent = sha256(left + right)
    """
    return sha256(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


__all__ = [
    "sha256",
    "hash_canonical",
    "hash_concat",
    "to_hex",
]
