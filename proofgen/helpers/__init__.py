"""
Sample data builders for proof-verification tests.

- universe.py: random tree population and the sorted key universe
- selection.py: key / non-key selection by position
- generate.py: fixture assembly
"""

from .universe import KEY_ALPHABET, KeyUniverse, build_tree, derive_value, random_key
from .selection import LEFT_NON_KEY, RIGHT_NON_KEY, get_key, get_non_key
from .generate import generate_absence_fixture, generate_fixture

__all__ = [
    "KEY_ALPHABET",
    "KeyUniverse",
    "build_tree",
    "derive_value",
    "random_key",
    "LEFT_NON_KEY",
    "RIGHT_NON_KEY",
    "get_key",
    "get_non_key",
    "generate_fixture",
    "generate_absence_fixture",
]
