"""
Utility functions for projgeom.

Includes configuration management.
"""

from .config import (
    Config,
    get_config,
    set_config,
    load_config,
    save_config,
)

__all__ = [
    "Config",
    "get_config",
    "set_config",
    "load_config",
    "save_config",
]
