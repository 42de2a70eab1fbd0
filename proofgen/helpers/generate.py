"""
Fixture Generation

Builds a random tree, selects a key by position, asks the tree for a
range proof and packages the result for proof-verification tests.

Any failure is terminal for the call; nothing is retried and no partial
result is returned.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from proofgen.config.runtime import GeneratorConfig, get_default_config
from proofgen.crypto.hashing import to_hex
from proofgen.helpers.selection import get_key, get_non_key
from proofgen.helpers.universe import build_tree
from proofgen.merkle.protocols import TreeFactory
from proofgen.schemas.errors import (
    UnexpectedProofShapeException,
    ValueMissingException,
)
from proofgen.schemas.fixture import AbsenceFixtureResult, FixtureResult, Position


logger = logging.getLogger(__name__)


def generate_fixture(
    size: int,
    position: Position | str,
    rng: Optional[random.Random] = None,
    tree_factory: Optional[TreeFactory] = None,
    config: Optional[GeneratorConfig] = None,
) -> FixtureResult:
    """
    Make a tree of ``size`` random entries and a range proof for the key
    at ``position``.

    Args:
        size: Number of random keys to insert
        position: LEFT, RIGHT or MIDDLE of the sorted keys
        rng: Random source for keys and MIDDLE selection
        tree_factory: Builds the empty tree; MerkleKVStore by default
        config: Generator configuration; the process default when omitted

    Returns:
        FixtureResult with key, value, single-leaf proof and root hash

    Raises:
        ValueMissingException: The tree returned no value for an inserted key
        UnexpectedProofShapeException: The proof does not attest exactly one leaf
    """
    position = Position(position)
    config = config or get_default_config()
    if rng is None:
        rng = config.random.make_rng()

    tree, universe = build_tree(size, rng=rng, tree_factory=tree_factory, config=config)
    key = get_key(universe, position, rng)

    value, proof = tree.get_with_proof(key)
    if not value:
        raise ValueMissingException(
            f"get_with_proof returned no value for inserted key {to_hex(key)}",
            key=key,
        )
    leaf_count = len(proof.leaves)
    if leaf_count != 1:
        raise UnexpectedProofShapeException(
            f"get_with_proof returned {leaf_count} leaves",
            leaf_count=leaf_count,
        )
    root = tree.working_hash()

    logger.info(
        f"Generated fixture: position={position.value} keys={len(universe)} "
        f"root={to_hex(root)}"
    )
    return FixtureResult(
        key=key,
        value=value,
        proof=proof,
        root_hash=root,
        position=position,
    )


def generate_absence_fixture(
    size: int,
    position: Position | str,
    rng: Optional[random.Random] = None,
    tree_factory: Optional[TreeFactory] = None,
    config: Optional[GeneratorConfig] = None,
) -> AbsenceFixtureResult:
    """
    Make a tree of ``size`` random entries and a range proof for a key
    that is not in it, placed at ``position``.

    The proof attests the leaves bracketing the absent key: one edge leaf for
    LEFT/RIGHT, predecessor and successor for MIDDLE.

    Raises:
        UnexpectedProofShapeException: The absent key was found in the tree,
            or the proof does not attest one or two leaves
    """
    position = Position(position)
    config = config or get_default_config()
    if rng is None:
        rng = config.random.make_rng()

    tree, universe = build_tree(size, rng=rng, tree_factory=tree_factory, config=config)
    key = get_non_key(universe, position, rng)

    value, proof = tree.get_with_proof(key)
    if value:
        raise UnexpectedProofShapeException(
            f"get_with_proof found a value for absent key {to_hex(key)}",
            details={"key": key.hex()},
        )
    leaf_count = len(proof.leaves)
    if leaf_count not in (1, 2):
        raise UnexpectedProofShapeException(
            f"get_with_proof returned {leaf_count} leaves for an absent key",
            leaf_count=leaf_count,
        )
    root = tree.working_hash()

    logger.info(
        f"Generated absence fixture: position={position.value} keys={len(universe)} "
        f"root={to_hex(root)}"
    )
    return AbsenceFixtureResult(
        key=key,
        proof=proof,
        root_hash=root,
        position=position,
    )


__all__ = [
    "generate_fixture",
    "generate_absence_fixture",
]
