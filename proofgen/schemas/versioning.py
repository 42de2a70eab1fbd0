"""
Versioning
File: versioning.py

Purpose: Fixture schema version constant. Kept free of imports from
other schema files to avoid circular dependencies.
"""

# Current fixture schema version - stamped on every result model
SCHEMA_VERSION: str = "v1"
