"""
Configuration management for the sysalert package.

This module provides a clean interface for loading, validating and resolving
the TOML configuration with singleton pattern management.
"""

# Main configuration interface
from .manager import (
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    load_config,
    set_config_path,
)

# For advanced usage - direct access to the individual stages
from .loader import get_config_path, load_toml_file
from .resolver import resolve_config
from .validators import validate_raw_config

__all__ = [
    # Main interface
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    "load_config",
    # Advanced interface
    "get_config_path",
    "load_toml_file",
    "resolve_config",
    "validate_raw_config",
]
