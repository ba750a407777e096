"""
Field validation functions for configuration values.

Each validator takes the raw value from the parsed TOML document and the
dotted field name used in error messages, and returns the normalized value.
"""

from typing import Any, Dict, Iterable, List, Optional

from .exceptions import ValidationError


def validate_positive_float(
    value: Any,
    min_value: float = 0.0,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that a value is a number within the given bounds.

    Booleans are rejected even though Python treats them as integers,
    since `one = true` in a config file is always a mistake.

    Args:
        value: Value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive), None for no limit
        field_name: Name of the field being validated

    Returns:
        Validated float value

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{field_name} must be a number, got {value!r}",
            field_name=field_name,
            value=value
        )
    float_value = float(value)
    if float_value != float_value:
        raise ValidationError(
            f"{field_name} must be a number, got nan",
            field_name=field_name,
            value=value
        )
    if float_value < min_value:
        raise ValidationError(
            f"{field_name} must be >= {min_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    if max_value is not None and float_value > max_value:
        raise ValidationError(
            f"{field_name} must be <= {max_value}, got {float_value}",
            field_name=field_name,
            value=value
        )
    return float_value


def validate_ratio(value: Any, field_name: str = "ratio") -> float:
    """Validate a free-space style ratio in [0, 1]."""
    return validate_positive_float(value, min_value=0.0, max_value=1.0, field_name=field_name)


def validate_bool(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_non_empty_string(value: Any, field_name: str = "value") -> str:
    """
    Validate that a value is a non-empty string.

    Integers are accepted and converted, which covers numeric chat ids
    written without quotes.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_string_list(value: Any, field_name: str = "value") -> List[str]:
    """Validate a list of strings, dropping duplicates but keeping order."""
    if not isinstance(value, list):
        raise ValidationError(
            f"{field_name} must be a list of strings, got {value!r}",
            field_name=field_name,
            value=value
        )
    seen = []
    for i, item in enumerate(value):
        if not isinstance(item, str) or not item:
            raise ValidationError(
                f"{field_name}[{i}] must be a non-empty string, got {item!r}",
                field_name=f"{field_name}[{i}]",
                value=item
            )
        if item not in seen:
            seen.append(item)
    return seen


def validate_table(value: Any, field_name: str) -> Dict[str, Any]:
    """Validate that a config section is a TOML table."""
    if not isinstance(value, dict):
        raise ValidationError(
            f"[{field_name}] must be a table, got {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def reject_unknown_keys(
    data: Dict[str, Any], allowed: Iterable[str], section: Optional[str] = None
) -> None:
    """
    Fail on any key not listed in ``allowed``.

    Raises:
        ValidationError: naming the first unknown key with its dotted path
    """
    allowed_keys = set(allowed)
    for key in data:
        if key not in allowed_keys:
            dotted = f"{section}.{key}" if section else key
            raise ValidationError(
                f"Unknown configuration key '{dotted}' "
                f"(expected one of: {', '.join(sorted(allowed_keys))})",
                field_name=dotted,
                value=data[key]
            )
