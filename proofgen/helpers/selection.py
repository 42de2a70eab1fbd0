"""
Key Selection

Picks the key to prove (present-key mode) or builds an absent key that is
not in the tree (absent-key mode), by position in the sorted universe.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from proofgen.crypto.hashing import to_hex
from proofgen.schemas.fixture import Position


logger = logging.getLogger(__name__)

# Sorts below any alphanumeric key
LEFT_NON_KEY: bytes = b"\x00\x00\x00\x01"
# Sorts above any alphanumeric key
RIGHT_NON_KEY: bytes = b"\xff\xff\xff\xff"


def get_key(
    universe: Sequence[bytes],
    position: Position | str,
    rng: Optional[random.Random] = None,
) -> bytes:
    """
    Return the key at ``position`` in a sorted universe.

    LEFT is the smallest key, RIGHT the largest, MIDDLE a uniformly
    chosen key that is neither.

    Preconditions:
        len(universe) >= 1 for LEFT/RIGHT (IndexError otherwise),
        len(universe) >= 3 for MIDDLE (ValueError from the random source otherwise).
    """
    position = Position(position)
    if position is Position.LEFT:
        return universe[0]
    if position is Position.RIGHT:
        return universe[-1]

    if rng is None:
        rng = random.Random()
    idx = rng.randrange(len(universe) - 2) + 1
    logger.debug(f"Selected middle key index={idx} of {len(universe)}")
    return universe[idx]


def get_non_key(
    universe: Sequence[bytes],
    position: Position | str,
    rng: Optional[random.Random] = None,
) -> bytes:
    """
    Return a key that is not in the universe, at ``position``.

    LEFT and RIGHT are fixed sentinels outside the alphanumeric key range.
    MIDDLE copies a middle key and sets its last two bytes to 0xff, which
    lands just after that key. Absence of the MIDDLE key relies on no
    real key sharing the 0xff suffix; it always holds for alphanumeric
    keys but is not checked here.
    """
    position = Position(position)
    if position is Position.LEFT:
        return LEFT_NON_KEY
    if position is Position.RIGHT:
        return RIGHT_NON_KEY

    key = bytearray(get_key(universe, position, rng))
    key[-2] = 0xFF
    key[-1] = 0xFF
    logger.debug(f"Built middle non-key {to_hex(bytes(key))}")
    return bytes(key)


__all__ = [
    "LEFT_NON_KEY",
    "RIGHT_NON_KEY",
    "get_key",
    "get_non_key",
]
