"""
Configuration resolution.

Fills every setting the operator left out with a default. Most defaults are
constants, but the load-average ceilings depend on the machine: a load
average equal to the number of logical CPUs is the point where the host is
saturated, so the CPU count is read from the host at resolution time.
"""

import logging
from typing import Optional

from ..models.config import (
    LoadAverageLimits,
    ProcessCheckToggles,
    RawConfig,
    ResolvedConfig,
    TelegramIdentity,
)
from ..system.metrics import MetricSource
from ..validation import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_DISK_MIN_FREE_RATIO = 0.05
DEFAULT_MEMORY_MIN_FREE_RATIO = 0.05
DEFAULT_WATCHED_MOUNTS = ("/",)


def _resolve_load_average(raw: RawConfig, host: MetricSource) -> LoadAverageLimits:
    configured = raw.load_average
    default: Optional[float] = None
    if None in (configured.one, configured.five, configured.fifteen):
        try:
            default = float(host.cpu_count())
        except Exception as e:
            raise ConfigError(
                f"Cannot derive default load average ceilings from CPU count: {e}",
                field_name="load_average",
            ) from e
        logger.debug(f"Defaulting unset load average ceilings to CPU count {default:g}")

    return LoadAverageLimits(
        one=configured.one if configured.one is not None else default,
        five=configured.five if configured.five is not None else default,
        fifteen=configured.fifteen if configured.fifteen is not None else default,
    )


def resolve_config(raw: RawConfig, host: MetricSource) -> ResolvedConfig:
    """
    Merge a RawConfig with host-derived defaults.

    Args:
        raw: Schema-validated configuration document
        host: Metric source queried for the CPU count when a load-average
            ceiling is not configured

    Returns:
        Immutable, fully populated ResolvedConfig

    Raises:
        ConfigError: If identity fields are empty or the CPU count cannot be read
    """
    if not raw.telegram_token or not raw.telegram_chat_id:
        raise ConfigError("telegram_token and telegram_chat_id are required")

    disks = raw.disks
    memory = raw.memory
    checks = raw.process_checks

    resolved = ResolvedConfig(
        identity=TelegramIdentity(token=raw.telegram_token, chat_id=raw.telegram_chat_id),
        load_average_max=_resolve_load_average(raw, host),
        disk_min_free_ratio=(
            disks.minimum if disks.minimum is not None else DEFAULT_DISK_MIN_FREE_RATIO
        ),
        watched_mounts=disks.disks if disks.disks is not None else DEFAULT_WATCHED_MOUNTS,
        memory_min_free_ratio=(
            memory.minimum if memory.minimum is not None else DEFAULT_MEMORY_MIN_FREE_RATIO
        ),
        process_checks=ProcessCheckToggles(
            web_server=not checks.disable_web_server_check,
            database=not checks.disable_mysql_check,
            database_memory=not checks.disable_mysql_memory_check,
        ),
        self_update_enabled=not raw.disable_self_update,
    )
    logger.debug(
        f"Resolved configuration: {resolved} (token {resolved.identity.masked_token})"
    )
    return resolved
