"""
Common factories shared by all proofgen tests.

Provides:
- Seeded random sources
- Hand-built key universes
- A populated MerkleKVStore
- FakeTree: a minimal stand-in for the tree collaborator, with knobs to
  make it misbehave
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from proofgen.config.runtime import GeneratorConfig, RandomConfig, TreeConfig
from proofgen.helpers.universe import derive_value
from proofgen.merkle.kvstore import MerkleKVStore


DEFAULT_SEED = 1234


# =============================================================================
# Random / Config Factories
# =============================================================================

def make_rng(seed: int = DEFAULT_SEED) -> random.Random:
    """Create a seeded random source."""
    return random.Random(seed)


def make_config(
    size: int = 10,
    key_length: int = 20,
    value_prefix: str = "value_for_",
    seed: Optional[int] = DEFAULT_SEED,
) -> GeneratorConfig:
    """Create a GeneratorConfig independent of the environment."""
    return GeneratorConfig(
        tree=TreeConfig(size=size, key_length=key_length, value_prefix=value_prefix),
        random=RandomConfig(seed=seed),
    )


# =============================================================================
# Universe / Store Factories
# =============================================================================

def make_universe(n: int = 5, prefix: bytes = b"key") -> tuple[bytes, ...]:
    """
    Create a sorted universe of ``n`` keys: key000, key001, ...

    Args:
        n: Number of keys.
        prefix: Common key prefix.
    """
    return tuple(prefix + f"{i:03d}".encode() for i in range(n))


def make_store(keys: Optional[list[bytes]] = None) -> MerkleKVStore:
    """Create a MerkleKVStore holding ``keys`` with derived values."""
    store = MerkleKVStore()
    for key in keys if keys is not None else list(make_universe()):
        store.set(key, derive_value(key))
    return store


# =============================================================================
# Fake Tree Collaborator
# =============================================================================

@dataclass(frozen=True)
class FakeProof:
    """Proof stand-in exposing only a leaf list."""
    leaves: list = field(default_factory=list)


class FakeTree:
    """
    Dict-backed tree that answers get_with_proof with a FakeProof.

    Args:
        leaf_count: Leaves to report for present keys (1 is well-formed).
        drop_values: Report no value for every key.
        root: Digest returned by working_hash.
    """

    def __init__(
        self,
        leaf_count: int = 1,
        drop_values: bool = False,
        root: bytes = b"\x42" * 32,
    ) -> None:
        self.data: dict[bytes, bytes] = {}
        self.leaf_count = leaf_count
        self.drop_values = drop_values
        self.root = root
        self.proof_requests: list[bytes] = []

    def set(self, key: bytes, value: bytes) -> bool:
        updated = key in self.data
        self.data[key] = value
        return updated

    def get_with_proof(self, key: bytes):
        self.proof_requests.append(key)
        if key not in self.data:
            return None, FakeProof(leaves=[])
        value = None if self.drop_values else self.data[key]
        return value, FakeProof(leaves=[(key, self.data[key])] * self.leaf_count)

    def working_hash(self) -> bytes:
        return self.root


def make_fake_tree_factory(**kwargs):
    """
    Return (factory, created) where factory builds FakeTree(**kwargs) and
    created collects every tree the factory built.
    """
    created: list[FakeTree] = []

    def factory() -> FakeTree:
        tree = FakeTree(**kwargs)
        created.append(tree)
        return tree

    return factory, created
