"""
Merkle Tree and Ordered Key/Value Store

This package provides:
- MerkleProof and the binary tree functions (root, proof, verify)
- MerkleKVStore: ordered in-memory key/value tree with range proofs
- ProvableTree: the capability interface fixture generation consumes

Usage:
    from proofgen.merkle import MerkleKVStore

    store = MerkleKVStore()
    store.set(b"key", b"value")
    value, proof = store.get_with_proof(b"key")
    assert proof.verify_item(b"key", value, store.working_hash())
"""
from .merkle_tree import (
    EMPTY_TREE_ROOT,
    MerkleProof,
    merkle_parent,
    build_merkle_root,
    build_merkle_proof,
    compute_root_from_proof,
    verify_merkle_proof,
)

from .kvstore import (
    leaf_hash,
    commit_root,
    ProofLeaf,
    RangeProof,
    MerkleKVStore,
)

from .protocols import (
    LeafCountedProof,
    ProvableTree,
    TreeFactory,
)


__all__ = [
    # Core types
    "MerkleProof",
    "EMPTY_TREE_ROOT",
    # Core functions
    "merkle_parent",
    "build_merkle_root",
    "build_merkle_proof",
    "compute_root_from_proof",
    "verify_merkle_proof",
    # Key/value store
    "leaf_hash",
    "commit_root",
    "ProofLeaf",
    "RangeProof",
    "MerkleKVStore",
    # Interfaces
    "LeafCountedProof",
    "ProvableTree",
    "TreeFactory",
]
