"""
Tree Capability Interface

The fixture helpers only need three things from a Merkle key/value tree:
single-key insert, value-plus-proof lookup, and the current root digest.
Anything that provides them (the bundled MerkleKVStore or a test fake)
can back fixture generation.
"""

from __future__ import annotations

from typing import Callable, Protocol, Sequence, runtime_checkable


# =============================================================================
# Proof / Tree Protocols
# =============================================================================

@runtime_checkable
class LeafCountedProof(Protocol):
    """A range proof that exposes the leaves it attests."""

    @property
    def leaves(self) -> Sequence[object]:
        """Leaf records attested by this proof."""
        ...


@runtime_checkable
class ProvableTree(Protocol):
    """Protocol for ordered key/value trees that can prove membership."""

    def set(self, key: bytes, value: bytes) -> bool:
        """
        Insert or replace a key/value pair.

        Returns:
            True if an existing key was updated, False on a fresh insert
        """
        ...

    def get_with_proof(self, key: bytes) -> tuple[bytes | None, LeafCountedProof]:
        """
        Look up a key and produce a range proof for it.

        Returns:
            Tuple of (value or None if absent, proof)
        """
        ...

    def working_hash(self) -> bytes:
        """Root digest of the tree's current contents."""
        ...


TreeFactory = Callable[[], ProvableTree]


__all__ = [
    "LeafCountedProof",
    "ProvableTree",
    "TreeFactory",
]
