"""
Ordered Merkle Key/Value Store
In-memory key/value tree whose leaves are kept in byte order of their keys
and committed to with the binary Merkle tree from merkle_tree.py.

Leaf Rules:
1. value_hash = sha256(value)
2. leaf = hash_canonical({"key": key, "value_hash": value_hash})
3. Leaves are ordered by key; inner = build_merkle_root(leaves)
4. root = sha256(total.to_bytes(8, "big") + inner), binding the leaf count;
   an empty store has root EMPTY_TREE_ROOT

Range Proofs:
- Present key: exactly one leaf, the key's own.
- Absent key: the neighbouring leaves that bracket it (predecessor and/or
  successor). An empty store yields a proof with no leaves.
"""
from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass, field

from proofgen.crypto.hashing import hash_canonical, sha256, to_hex
from proofgen.merkle.merkle_tree import (
    EMPTY_TREE_ROOT,
    MerkleProof,
    build_merkle_proof,
    build_merkle_root,
    compute_root_from_proof,
    verify_merkle_proof,
)


logger = logging.getLogger(__name__)


def leaf_hash(key: bytes, value_hash: bytes) -> bytes:
    """Hash a key and the digest of its value into a leaf."""
    return hash_canonical({"key": key, "value_hash": value_hash})


def commit_root(inner_root: bytes, total: int) -> bytes:
    """Bind the leaf count to the Merkle root of the leaves."""
    if total == 0:
        return EMPTY_TREE_ROOT
    return sha256(total.to_bytes(8, "big") + inner_root)


@dataclass(frozen=True)
class ProofLeaf:
    """
    One attested key/value membership record inside a range proof.

    Attributes:
        key: The leaf's key
        value_hash: sha256 of the leaf's value
        proof: Inclusion proof of the leaf hash under the leaves' Merkle root
    """
    key: bytes
    value_hash: bytes
    proof: MerkleProof

    @property
    def index(self) -> int:
        return self.proof.index

    def verify(self, inner_root: bytes) -> bool:
        """Check the leaf hashes to proof.leaf and that proof.leaf is under inner_root."""
        if self.proof.root != inner_root:
            return False
        if leaf_hash(self.key, self.value_hash) != self.proof.leaf:
            return False
        return verify_merkle_proof(self.proof)


@dataclass(frozen=True)
class RangeProof:
    """
    Range proof returned by MerkleKVStore.get_with_proof.

    Attributes:
        leaves: Attested leaves, in key order
        total: Number of leaves in the tree the proof was taken from,
            committed to by root
        root: Root digest the proof was taken against
    """
    leaves: list[ProofLeaf] = field(default_factory=list)
    total: int = 0
    root: bytes = EMPTY_TREE_ROOT

    def verify(self, root: bytes) -> bool:
        """
        Verify every leaf against ``root``, that ``total`` is the leaf count
        ``root`` commits to, and that leaves are adjacent and in key order.
        """
        if self.root != root:
            return False
        if not self.leaves:
            return self.total == 0 and root == EMPTY_TREE_ROOT

        if self.total < len(self.leaves):
            return False
        inner_root = compute_root_from_proof(self.leaves[0].proof)
        if commit_root(inner_root, self.total) != root:
            return False

        for prev, cur in zip(self.leaves, self.leaves[1:]):
            if cur.key <= prev.key or cur.index != prev.index + 1:
                return False

        return all(leaf.index < self.total and leaf.verify(inner_root) for leaf in self.leaves)

    def verify_item(self, key: bytes, value: bytes, root: bytes) -> bool:
        """Verify that the proof attests exactly ``key`` -> ``value`` under ``root``."""
        if len(self.leaves) != 1:
            return False
        leaf = self.leaves[0]
        if leaf.key != key or leaf.value_hash != sha256(value):
            return False
        return self.verify(root)

    def verify_absence(self, key: bytes, root: bytes) -> bool:
        """
        Verify that ``key`` is not in the tree committed to by ``root``.

        The attested leaves must bracket the key: a predecessor and
        successor at adjacent indices, or a single edge leaf when the key
        falls outside the tree's key range.
        """
        if not self.verify(root):
            return False
        if not self.leaves:
            return True

        left = [leaf for leaf in self.leaves if leaf.key < key]
        right = [leaf for leaf in self.leaves if leaf.key > key]
        if len(left) + len(right) != len(self.leaves):
            # one of the leaves is the key itself
            return False
        if len(left) > 1 or len(right) > 1:
            return False

        if left and right:
            return right[0].index == left[0].index + 1
        if left:
            return left[0].index == self.total - 1
        return right[0].index == 0


class MerkleKVStore:
    """
    In-memory ordered key/value store with Merkle range proofs.

    Keys are deduplicated: setting an existing key replaces its value.

    Example:
        >>> store = MerkleKVStore()
        >>> store.set(b"alpha", b"1")
        False
        >>> value, proof = store.get_with_proof(b"alpha")
        >>> proof.verify_item(b"alpha", value, store.working_hash())
        True
    """

    def __init__(self) -> None:
        self._keys: list[bytes] = []
        self._values: dict[bytes, bytes] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def set(self, key: bytes, value: bytes) -> bool:
        """
        Insert or replace a key/value pair.

        Returns:
            True if the key already existed and its value was replaced

        Raises:
            ValueError: If key is empty or value is None
        """
        if not key:
            raise ValueError("Key must be non-empty bytes")
        if value is None:
            raise ValueError("Value must not be None")

        key = bytes(key)
        updated = key in self._values
        if not updated:
            self._keys.insert(bisect_left(self._keys, key), key)
        self._values[key] = bytes(value)
        return updated

    def get(self, key: bytes) -> bytes | None:
        return self._values.get(key)

    def has(self, key: bytes) -> bool:
        return key in self._values

    def keys(self) -> tuple[bytes, ...]:
        """All keys in ascending byte order."""
        return tuple(self._keys)

    def _leaf_hashes(self) -> list[bytes]:
        return [leaf_hash(k, sha256(self._values[k])) for k in self._keys]

    def working_hash(self) -> bytes:
        """Root digest of the current contents."""
        return commit_root(build_merkle_root(self._leaf_hashes()), len(self._keys))

    def _proof_leaf(self, leaves: list[bytes], index: int) -> ProofLeaf:
        key = self._keys[index]
        return ProofLeaf(
            key=key,
            value_hash=sha256(self._values[key]),
            proof=build_merkle_proof(leaves, index),
        )

    def get_with_proof(self, key: bytes) -> tuple[bytes | None, RangeProof]:
        """
        Look up ``key`` and build a range proof for it.

        Returns:
            (value, proof with the key's leaf) if the key is present,
            (None, proof with the bracketing leaves) if it is absent
        """
        leaves = self._leaf_hashes()
        total = len(leaves)
        root = commit_root(build_merkle_root(leaves), total)

        idx = bisect_left(self._keys, key)
        if idx < total and self._keys[idx] == key:
            indices = [idx]
        else:
            indices = [i for i in (idx - 1, idx) if 0 <= i < total]

        proof = RangeProof(
            leaves=[self._proof_leaf(leaves, i) for i in indices],
            total=total,
            root=root,
        )
        logger.debug(
            f"get_with_proof key={to_hex(key)} present={key in self._values} "
            f"leaves={len(proof.leaves)} total={total}"
        )
        return self._values.get(key), proof


__all__ = [
    "leaf_hash",
    "commit_root",
    "ProofLeaf",
    "RangeProof",
    "MerkleKVStore",
]
