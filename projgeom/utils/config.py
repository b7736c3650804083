"""
Configuration management for projgeom.

Provides the configuration class holding comparison tolerances and debug
switches, plus JSON load/save and the process-wide active configuration.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any
from pathlib import Path

from ..core.constants import DEFAULT_ATOL

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Configuration for projgeom.

    Attributes:
        atol: Absolute tolerance used by approx_equal / is_zero for floats
        check_preconditions: Check non-degeneracy preconditions (collinear
            triangles, non-coincident harmonic triples) and raise
            DegenerateError instead of returning degenerate results
    """

    atol: float = DEFAULT_ATOL
    check_preconditions: bool = False

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


_active_config = Config()


def get_config() -> Config:
    """Return the active configuration."""
    return _active_config


def set_config(config: Config) -> Config:
    """
    Replace the active configuration.

    Returns:
        The previously active configuration, so callers can restore it
    """
    global _active_config
    previous = _active_config
    _active_config = config
    logger.debug(f"Active config set: {config}")
    return previous


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved config to {filepath}")
