"""
Canonical Serialization
File: canonical.py

Purpose: Deterministic serialization of leaf records for hashing.
All outputs from this module MUST be identical across runs.
"""

import json
from typing import Any

from .errors import CanonicalizationException

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Recursively canonicalize a leaf record for JSON serialization.

    Supports the shapes the key/value store hashes: dicts of bytes or
    strings. Bytes become lowercase hex strings and None entries are
    dropped.

    Raises:
        CanonicalizationException: If the value has any other type.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()

    if isinstance(value, dict):
        return {
            str(k): canonicalize_value(v, f"{path}.{k}" if path else str(k))
            for k, v in value.items()
            if v is not None
        }

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize a leaf record to canonical JSON: sorted keys, no whitespace,
    bytes as hex.

    Example:
        >>> dumps_canonical({"value_hash": b"\\x01", "key": b"ab"})
        '{"key":"6162","value_hash":"01"}'
    """
    return json.dumps(
        canonicalize_value(obj),
        sort_keys=True,
        separators=CANONICAL_JSON_SEPARATORS,
        ensure_ascii=False,
    )
