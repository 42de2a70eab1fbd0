"""
Binary Merkle Tree
Root computation, inclusion proof generation and verification over an
ordered list of leaf hashes.

Commitment Rules:
1. Parent hashing: parent = sha256(left + right)
2. Padding rule: Duplicate last node if odd number at any level
3. Empty leaves: build_merkle_root([]) returns sha256(b"")
4. Single leaf: root = leaf (the leaf hash itself)

Determinism Notes:
- This module never sorts leaves - it trusts input order. The key/value
  store is responsible for handing leaves over in key order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from proofgen.crypto.hashing import hash_concat, sha256


# Empty tree sentinel: sha256 of empty bytes
EMPTY_TREE_ROOT: bytes = sha256(b"")


@dataclass(frozen=True)
class MerkleProof:
    """
    Inclusion proof for a single leaf.

    Attributes:
        leaf: The leaf hash being proven
        index: The 0-based index of the leaf in the ordered leaf list
        siblings: Sibling hashes from bottom to top of tree
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: list[bytes] = field(default_factory=list)
    root: bytes = EMPTY_TREE_ROOT

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """Compute the parent hash of two child nodes."""
    return hash_concat(left, right)


def _next_level(level: list[bytes]) -> list[bytes]:
    # Pads in place; callers own `level`.
    if len(level) % 2 == 1:
        level.append(level[-1])
    return [
        merkle_parent(level[i], level[i + 1])
        for i in range(0, len(level), 2)
    ]


def build_merkle_root(leaves: Sequence[bytes]) -> bytes:
    """
    Build a Merkle root from a sequence of leaf hashes.

    Padding Rule: Duplicate last node at each level if odd.
    Example: [a, b, c] -> [a, b, c, c] -> [parent(a,b), parent(c,c)]

    Args:
        leaves: Leaf hashes. Order matters and is preserved.

    Returns:
        32-byte Merkle root
    """
    if len(leaves) == 0:
        return EMPTY_TREE_ROOT

    current_level: list[bytes] = list(leaves)
    while len(current_level) > 1:
        current_level = _next_level(current_level)

    return current_level[0]


def build_merkle_proof(leaves: Sequence[bytes], index: int) -> MerkleProof:
    """
    Generate a Merkle proof for the leaf at the given index.

    The proof consists of the sibling hashes needed to recompute
    the path from the leaf to the root.

    Args:
        leaves: Sequence of leaf hashes
        index: 0-based index of the leaf to prove

    Returns:
        MerkleProof with leaf, index, siblings (bottom-up), and root

    Raises:
        IndexError: If index is out of range
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot generate proof for empty leaf list")

    if index < 0 or index >= len(leaves):
        raise IndexError(
            f"Leaf index {index} out of range for {len(leaves)} leaves"
        )

    siblings: list[bytes] = []
    current_level: list[bytes] = list(leaves)
    current_index = index

    while len(current_level) > 1:
        if len(current_level) % 2 == 1:
            current_level.append(current_level[-1])

        # XOR with 1 flips to the other child of the same parent
        siblings.append(current_level[current_index ^ 1])

        current_level = _next_level(current_level)
        current_index //= 2

    return MerkleProof(
        leaf=leaves[index],
        index=index,
        siblings=siblings,
        root=current_level[0],
    )


def compute_root_from_proof(proof: MerkleProof) -> bytes:
    """Recompute the root implied by a proof's leaf and siblings."""
    current_hash = proof.leaf
    current_index = proof.index

    for sibling in proof.siblings:
        if current_index % 2 == 0:
            current_hash = merkle_parent(current_hash, sibling)
        else:
            current_hash = merkle_parent(sibling, current_hash)
        current_index //= 2

    return current_hash


def verify_merkle_proof(proof: MerkleProof) -> bool:
    """
    Verify a Merkle proof against the root it claims.

    Returns:
        True if proof is valid, False otherwise
    """
    return compute_root_from_proof(proof) == proof.root


__all__ = [
    "EMPTY_TREE_ROOT",
    "MerkleProof",
    "merkle_parent",
    "build_merkle_root",
    "build_merkle_proof",
    "compute_root_from_proof",
    "verify_merkle_proof",
]
