"""
Fixture Schemas
File: fixture.py

Purpose: Key positions and the result models handed to downstream
proof-verification tests.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .versioning import SCHEMA_VERSION


class Position(str, Enum):
    """Where in the sorted key universe a key is selected."""
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


def _require_leaves(v: Any) -> Any:
    if not hasattr(v, "leaves"):
        raise ValueError(
            f"proof must expose a 'leaves' sequence, got {type(v).__name__}"
        )
    return v


class FixtureResult(BaseModel):
    """
    A present-key fixture: a key, its value, a range proof attesting
    key -> value, and the root digest the proof was taken against.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    schema_version: str = Field(default=SCHEMA_VERSION)
    key: bytes = Field(..., description="Proven key, a member of the key universe", min_length=1)
    value: bytes = Field(..., description="Value stored under key", min_length=1)
    proof: Any = Field(..., description="Range proof from the tree, attesting exactly one leaf")
    root_hash: bytes = Field(..., description="Tree digest when the proof was produced", min_length=1)
    position: Position | None = Field(default=None, description="Position the key was selected at")

    @field_validator("proof")
    @classmethod
    def validate_proof_has_leaves(cls, v: Any) -> Any:
        return _require_leaves(v)

    @property
    def leaf_count(self) -> int:
        return len(self.proof.leaves)


class AbsenceFixtureResult(BaseModel):
    """
    An absent-key fixture: a key not in the tree and a range proof over
    the leaves that bracket it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    schema_version: str = Field(default=SCHEMA_VERSION)
    key: bytes = Field(..., description="Key absent from the key universe", min_length=1)
    proof: Any = Field(..., description="Range proof over the neighbouring leaves")
    root_hash: bytes = Field(..., description="Tree digest when the proof was produced", min_length=1)
    position: Position | None = Field(default=None, description="Position the absent key was built for")

    @field_validator("proof")
    @classmethod
    def validate_proof_has_leaves(cls, v: Any) -> Any:
        return _require_leaves(v)

    @property
    def leaf_count(self) -> int:
        return len(self.proof.leaves)
