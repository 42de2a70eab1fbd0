"""
Key Universe Construction

Populates a fresh tree with random key/value pairs and returns the sorted,
deduplicated keys that went in.
"""

from __future__ import annotations

import logging
import random
import string
from typing import Optional

from proofgen.config.runtime import GeneratorConfig, get_default_config
from proofgen.merkle.kvstore import MerkleKVStore
from proofgen.merkle.protocols import ProvableTree, TreeFactory


logger = logging.getLogger(__name__)

# Alphabet for random keys; every byte sorts between 0x30 and 0x7a
KEY_ALPHABET: str = string.ascii_letters + string.digits

KeyUniverse = tuple[bytes, ...]


def random_key(rng: random.Random, length: int) -> bytes:
    """Draw a random alphanumeric key of ``length`` bytes."""
    return "".join(rng.choice(KEY_ALPHABET) for _ in range(length)).encode("ascii")


def derive_value(key: bytes, prefix: bytes = b"value_for_") -> bytes:
    """The value stored for ``key``: ``prefix + key``."""
    return prefix + key


def build_tree(
    size: int,
    rng: Optional[random.Random] = None,
    tree_factory: Optional[TreeFactory] = None,
    key_length: Optional[int] = None,
    value_prefix: Optional[bytes] = None,
    config: Optional[GeneratorConfig] = None,
) -> tuple[ProvableTree, KeyUniverse]:
    """
    Create a tree holding ``size`` random key/value pairs.

    Random keys may collide; the tree keeps one entry per key and so does
    the returned universe, which can therefore be shorter than ``size``.

    Args:
        size: Number of random keys to draw (must be positive)
        rng: Random source; a fresh one from config.random when omitted
        tree_factory: Builds the empty tree; MerkleKVStore by default
        key_length: Length of each key; config.tree.key_length when omitted
        value_prefix: Prefix for derived values; config.tree.value_prefix when omitted
        config: Generator configuration; the process default when omitted

    Returns:
        Tuple of (populated tree, keys in ascending byte order)

    Raises:
        ValueError: If size or key_length is not positive
    """
    if size <= 0:
        raise ValueError(f"Tree size must be positive, got {size}")

    config = config or get_default_config()
    if rng is None:
        rng = config.random.make_rng()
    if key_length is None:
        key_length = config.tree.key_length
    if value_prefix is None:
        value_prefix = config.tree.value_prefix_bytes
    if key_length <= 0:
        raise ValueError(f"Key length must be positive, got {key_length}")

    tree = (tree_factory or MerkleKVStore)()

    inserted: set[bytes] = set()
    for _ in range(size):
        key = random_key(rng, key_length)
        tree.set(key, derive_value(key, value_prefix))
        inserted.add(key)

    universe: KeyUniverse = tuple(sorted(inserted))
    logger.debug(f"Built tree: requested={size} distinct={len(universe)} key_length={key_length}")
    return tree, universe


__all__ = [
    "KEY_ALPHABET",
    "KeyUniverse",
    "random_key",
    "derive_value",
    "build_tree",
]
