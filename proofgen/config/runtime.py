"""
Runtime Configuration

Defaults for fixture generation: tree population, key shape, value
derivation and the random seed.
"""

from __future__ import annotations

import copy
import os
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from proofgen.schemas.errors import ConfigException

load_dotenv()


@dataclass
class TreeConfig:
    """Configuration for tree population."""
    size: int = 100
    key_length: int = 20
    value_prefix: str = "value_for_"

    @property
    def value_prefix_bytes(self) -> bytes:
        return self.value_prefix.encode("utf-8")


@dataclass
class RandomConfig:
    """Configuration for the random source."""
    seed: Optional[int] = None  # None -> OS entropy

    def make_rng(self) -> random.Random:
        """Create a fresh random source; seeded when a seed is configured."""
        return random.Random(self.seed)


@dataclass
class GeneratorConfig:
    """
    Complete configuration for fixture generation.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    random: RandomConfig = field(default_factory=RandomConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _parse_int(name: str, raw: str) -> int:
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigException(
                f"{name} must be an integer, got {raw!r}",
                setting=name,
            ) from e

    @classmethod
    def _get_env_overrides(cls) -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - PROOFGEN_TREE_SIZE: Number of random keys to insert
        - PROOFGEN_KEY_LENGTH: Length of each random key
        - PROOFGEN_VALUE_PREFIX: Prefix prepended to a key to form its value
        - PROOFGEN_SEED: Integer seed for the random source
        """
        overrides: dict[str, Any] = {}

        if os.getenv("PROOFGEN_TREE_SIZE"):
            overrides.setdefault("tree", {})["size"] = cls._parse_int(
                "PROOFGEN_TREE_SIZE", os.environ["PROOFGEN_TREE_SIZE"]
            )
        if os.getenv("PROOFGEN_KEY_LENGTH"):
            overrides.setdefault("tree", {})["key_length"] = cls._parse_int(
                "PROOFGEN_KEY_LENGTH", os.environ["PROOFGEN_KEY_LENGTH"]
            )
        if os.getenv("PROOFGEN_VALUE_PREFIX"):
            overrides.setdefault("tree", {})["value_prefix"] = os.getenv("PROOFGEN_VALUE_PREFIX")

        if os.getenv("PROOFGEN_SEED"):
            overrides.setdefault("random", {})["seed"] = cls._parse_int(
                "PROOFGEN_SEED", os.environ["PROOFGEN_SEED"]
            )

        return overrides

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GeneratorConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})
        random_data = data.get("random", {})

        try:
            tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
            rand = RandomConfig(**random_data) if random_data else RandomConfig()
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

        return cls(
            tree=tree,
            random=rand,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "GeneratorConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for key, value in overrides.get("tree", {}).items():
            setattr(new_config.tree, key, value)

        for key, value in overrides.get("random", {}).items():
            setattr(new_config.random, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "size": self.tree.size,
                "key_length": self.tree.key_length,
                "value_prefix": self.tree.value_prefix,
            },
            "random": {
                "seed": self.random.seed,
            },
            "extra": self.extra,
        }


# Global default configuration
_default_config: Optional[GeneratorConfig] = None


def get_default_config() -> GeneratorConfig:
    """Get the default generator configuration."""
    global _default_config
    if _default_config is None:
        _default_config = GeneratorConfig.from_env()
    return _default_config


def set_default_config(config: Optional[GeneratorConfig]) -> None:
    """Set the default generator configuration (None resets to env)."""
    global _default_config
    _default_config = config
