"""
Schemas, canonical serialization and error taxonomy.
"""

from .errors import (
    ErrorCodes,
    ProofgenError,
    ProofgenException,
    CanonicalizationException,
    ValueMissingException,
    UnexpectedProofShapeException,
    ConfigException,
)
from .canonical import canonicalize_value, dumps_canonical
from .versioning import SCHEMA_VERSION
from .fixture import Position, FixtureResult, AbsenceFixtureResult

__all__ = [
    "ErrorCodes",
    "ProofgenError",
    "ProofgenException",
    "CanonicalizationException",
    "ValueMissingException",
    "UnexpectedProofShapeException",
    "ConfigException",
    "canonicalize_value",
    "dumps_canonical",
    "SCHEMA_VERSION",
    "Position",
    "FixtureResult",
    "AbsenceFixtureResult",
]
