"""
Hashing utilities shared by the Merkle store and the fixture helpers.
"""
from .hashing import (
    sha256,
    hash_canonical,
    hash_concat,
    to_hex,
)

__all__ = [
    "sha256",
    "hash_canonical",
    "hash_concat",
    "to_hex",
]
