"""
Validation and error handling for the sysalert package.

This module provides configuration field validation and the error taxonomy
with consistent error reporting across the application.
"""

from .exceptions import (
    ConfigError,
    DeliveryError,
    ErrorSeverity,
    SamplingError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    reject_unknown_keys,
    validate_bool,
    validate_non_empty_string,
    validate_positive_float,
    validate_ratio,
    validate_string_list,
    validate_table,
)

__all__ = [
    # Errors
    "ConfigError",
    "DeliveryError",
    "ErrorSeverity",
    "SamplingError",
    "ValidationError",
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    # Validators
    "reject_unknown_keys",
    "validate_bool",
    "validate_non_empty_string",
    "validate_positive_float",
    "validate_ratio",
    "validate_string_list",
    "validate_table",
]
