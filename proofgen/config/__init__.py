"""
Runtime Configuration Module

Provides configuration loading and management for fixture generation.
"""

from .runtime import (
    GeneratorConfig,
    RandomConfig,
    TreeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "GeneratorConfig",
    "RandomConfig",
    "TreeConfig",
    "get_default_config",
    "set_default_config",
]
