"""
Test fixtures package for proofgen tests.

Provides factory functions for creating test objects:
- common.py: random sources, configs, universes, stores and the fake tree

Usage:
    from fixtures import make_universe, make_fake_tree_factory

    def test_something():
        universe = make_universe(7)
        factory, created = make_fake_tree_factory(leaf_count=2)
"""

from .common import (
    DEFAULT_SEED,
    FakeProof,
    FakeTree,
    make_config,
    make_fake_tree_factory,
    make_rng,
    make_store,
    make_universe,
)

__all__ = [
    "DEFAULT_SEED",
    "FakeProof",
    "FakeTree",
    "make_config",
    "make_fake_tree_factory",
    "make_rng",
    "make_store",
    "make_universe",
]
