"""
Strict schema validation for the configuration document.

Turns the parsed TOML dictionary into a RawConfig. Any key the schema does
not know is an error, so typos surface at startup instead of silently
falling back to a default.
"""

import logging
from typing import Any, Dict

from ..models.config import (
    RawConfig,
    RawDisks,
    RawLoadAverage,
    RawMemory,
    RawProcessChecks,
)
from ..validation import (
    ValidationError,
    reject_unknown_keys,
    validate_bool,
    validate_non_empty_string,
    validate_positive_float,
    validate_ratio,
    validate_string_list,
    validate_table,
)

logger = logging.getLogger(__name__)

TOP_LEVEL_KEYS = (
    "telegram_token",
    "telegram_chat_id",
    "disable_self_update",
    "memory",
    "disks",
    "load_average",
    "process_checks",
)
MEMORY_KEYS = ("minimum",)
DISKS_KEYS = ("disks", "minimum")
LOAD_AVERAGE_KEYS = ("one", "five", "fifteen")
PROCESS_CHECKS_KEYS = (
    "disable_web_server_check",
    "disable_mysql_check",
    "disable_mysql_memory_check",
)


def _optional_ratio(section: Dict[str, Any], key: str, field_name: str):
    if key not in section:
        return None
    return validate_ratio(section[key], field_name=field_name)


def validate_memory_section(data: Any) -> RawMemory:
    section = validate_table(data, "memory")
    reject_unknown_keys(section, MEMORY_KEYS, "memory")
    return RawMemory(minimum=_optional_ratio(section, "minimum", "memory.minimum"))


def validate_disks_section(data: Any) -> RawDisks:
    section = validate_table(data, "disks")
    reject_unknown_keys(section, DISKS_KEYS, "disks")
    disks = None
    if "disks" in section:
        disks = tuple(validate_string_list(section["disks"], field_name="disks.disks"))
    return RawDisks(
        disks=disks,
        minimum=_optional_ratio(section, "minimum", "disks.minimum"),
    )


def validate_load_average_section(data: Any) -> RawLoadAverage:
    section = validate_table(data, "load_average")
    reject_unknown_keys(section, LOAD_AVERAGE_KEYS, "load_average")
    values = {}
    for key in LOAD_AVERAGE_KEYS:
        if key in section:
            values[key] = validate_positive_float(
                section[key], min_value=0.0, field_name=f"load_average.{key}"
            )
    return RawLoadAverage(**values)


def validate_process_checks_section(data: Any) -> RawProcessChecks:
    section = validate_table(data, "process_checks")
    reject_unknown_keys(section, PROCESS_CHECKS_KEYS, "process_checks")
    return RawProcessChecks(**{
        key: validate_bool(section[key], field_name=f"process_checks.{key}")
        for key in PROCESS_CHECKS_KEYS
        if key in section
    })


def validate_raw_config(data: Dict[str, Any]) -> RawConfig:
    """
    Validate a parsed configuration document and build a RawConfig.

    Args:
        data: Parsed TOML document

    Returns:
        RawConfig with None for every optional value that was not given

    Raises:
        ValidationError: On unknown keys, wrong types, out-of-range ratios
            or missing identity fields
    """
    reject_unknown_keys(data, TOP_LEVEL_KEYS)

    for required in ("telegram_token", "telegram_chat_id"):
        if required not in data:
            raise ValidationError(
                f"Missing required configuration key '{required}'",
                field_name=required,
            )

    raw = RawConfig(
        telegram_token=validate_non_empty_string(data["telegram_token"], "telegram_token"),
        telegram_chat_id=validate_non_empty_string(data["telegram_chat_id"], "telegram_chat_id"),
        disable_self_update=validate_bool(
            data.get("disable_self_update", False), "disable_self_update"
        ),
        memory=validate_memory_section(data.get("memory", {})),
        disks=validate_disks_section(data.get("disks", {})),
        load_average=validate_load_average_section(data.get("load_average", {})),
        process_checks=validate_process_checks_section(data.get("process_checks", {})),
    )
    logger.debug("Configuration document passed schema validation")
    return raw
