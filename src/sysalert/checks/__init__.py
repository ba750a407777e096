"""
Health check implementations.

Every check shares the AbstractCheck interface and the check_value
primitive; each module owns one kind of metric.
"""

from .base import AbstractCheck, check_value, sampling_failure
from .disk import DiskFreeCheck
from .heartbeat import HEARTBEAT_FILE, MAX_HEARTBEAT_AGE, HeartbeatFreshnessCheck
from .load import LoadAverageCheck
from .memory import MemoryFreeCheck
from .processes import (
    DATABASE_MEMORY_SHARE,
    DATABASE_PROCESSES,
    SINGLETON_WORKER,
    WEB_SERVER_PROCESSES,
    DuplicateProcessCheck,
    ProcessMemoryShareCheck,
    ProcessPresenceCheck,
)
from .uptime import MIN_UPTIME, UptimeFloorCheck

__all__ = [
    "AbstractCheck",
    "check_value",
    "sampling_failure",
    "DiskFreeCheck",
    "HeartbeatFreshnessCheck",
    "LoadAverageCheck",
    "MemoryFreeCheck",
    "ProcessPresenceCheck",
    "ProcessMemoryShareCheck",
    "DuplicateProcessCheck",
    "UptimeFloorCheck",
    # Fixed limits
    "DATABASE_MEMORY_SHARE",
    "DATABASE_PROCESSES",
    "HEARTBEAT_FILE",
    "MAX_HEARTBEAT_AGE",
    "MIN_UPTIME",
    "SINGLETON_WORKER",
    "WEB_SERVER_PROCESSES",
]
