"""
Configuration management and singleton pattern.

The configuration is read once per process: the first call to get_config()
loads, validates and resolves it, and later calls return the cached
ResolvedConfig.
"""

import logging
from pathlib import Path
from typing import Optional

from ..models.config import ResolvedConfig
from ..system.metrics import MetricSource, PsutilMetricSource
from ..validation import ConfigError, ValidationError
from .loader import get_config_path, load_toml_file
from .resolver import resolve_config
from .validators import validate_raw_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[ResolvedConfig] = None

# None means "decide at load time" (CONFIG environment variable or default file).
_CONFIG_FILE_PATH: Optional[Path] = None


def set_config_path(config_path: Optional[Path]) -> None:
    """
    Set a custom configuration file path and drop any cached configuration.

    Args:
        config_path: Path to the TOML file, or None to restore the default lookup
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = config_path
    _CONFIG = None
    logger.debug(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """Clear the cached configuration, forcing a reload on next access."""
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def load_config(config_path: Path, host: MetricSource) -> ResolvedConfig:
    """
    Load, validate and resolve a configuration file.

    Args:
        config_path: Path to the TOML file
        host: Metric source used for host-derived defaults

    Returns:
        Fully resolved configuration

    Raises:
        ConfigError: For every failure, with the cause chained
    """
    data = load_toml_file(config_path)
    try:
        raw = validate_raw_config(data)
    except ConfigError:
        raise
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration in {config_path}: {e}",
            field_name=e.field_name,
            value=e.value,
        ) from e
    return resolve_config(raw, host)


def get_config(host: Optional[MetricSource] = None) -> ResolvedConfig:
    """
    Get the resolved configuration, loading it on first use.

    Args:
        host: Metric source for host-derived defaults; the local host via
            psutil when omitted. Only consulted on the first (loading) call.

    Returns:
        The cached ResolvedConfig

    Raises:
        ConfigError: If the configuration cannot be loaded
    """
    global _CONFIG
    if _CONFIG is None:
        path = _CONFIG_FILE_PATH or get_config_path()
        _CONFIG = load_config(path, host or PsutilMetricSource())
        logger.info(f"Configuration loaded from {path}")
    return _CONFIG


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH or get_config_path()),
        "watched_mounts": list(_CONFIG.watched_mounts) if _CONFIG else [],
        "self_update_enabled": _CONFIG.self_update_enabled if _CONFIG else None,
    }
