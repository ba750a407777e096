"""
Configuration file loading utilities.

This module handles locating the configuration file and the low-level
parsing of its TOML content.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from ..validation import ConfigError, ErrorSeverity, handle_config_error

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "sysalert.toml"
CONFIG_ENV_VAR = "CONFIG"


def get_config_path(explicit: Optional[str] = None) -> Path:
    """
    Resolve which configuration file to load.

    The explicit path (from the command line) wins, then the ``CONFIG``
    environment variable, then ``sysalert.toml`` in the working directory.
    """
    if explicit:
        return Path(explicit)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_FILE)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.is_file():
        raise ConfigError(f"{description} not found: {file_path}", value=str(file_path))

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.DEBUG,
            reraise=False,
            logger=logger
        )
        raise ConfigError(f"Malformed {description} {file_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {description} {file_path}: {e}") from e
