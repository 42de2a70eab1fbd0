"""
proofgen - Merkle range-proof test fixture generator.

Usage:
    import random
    from proofgen import Position, generate_fixture

    fixture = generate_fixture(100, Position.MIDDLE, rng=random.Random(7))
    assert fixture.proof.verify_item(fixture.key, fixture.value, fixture.root_hash)
"""

from proofgen.helpers import (
    build_tree,
    generate_absence_fixture,
    generate_fixture,
    get_key,
    get_non_key,
)
from proofgen.schemas.fixture import AbsenceFixtureResult, FixtureResult, Position

__version__ = "0.1.0"

__all__ = [
    "build_tree",
    "get_key",
    "get_non_key",
    "generate_fixture",
    "generate_absence_fixture",
    "Position",
    "FixtureResult",
    "AbsenceFixtureResult",
]
