"""
Pytest configuration and shared fixtures for proofgen tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from PROOFGEN_* environment settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import (  # noqa: E402
    make_config,
    make_rng,
    make_store,
    make_universe,
)
from proofgen.config.runtime import set_default_config  # noqa: E402


_ENV_VARS = (
    "PROOFGEN_TREE_SIZE",
    "PROOFGEN_KEY_LENGTH",
    "PROOFGEN_VALUE_PREFIX",
    "PROOFGEN_SEED",
)


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Clear PROOFGEN_* env vars and the cached default config."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return make_rng()


@pytest.fixture
def config():
    """Provide a seeded GeneratorConfig with small trees."""
    return make_config()


@pytest.fixture
def universe():
    """Provide a five-key sorted universe."""
    return make_universe()


@pytest.fixture
def store():
    """Provide a MerkleKVStore populated from the default universe."""
    return make_store()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
