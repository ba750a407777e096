"""
System interaction utilities.

This package provides everything that touches the host directly:

- Metric sources for load, disks, memory, processes and uptime
- Primary network address discovery
- Command execution with proper error handling and logging
- The self-update workflow
"""

from .commands import run_command
from .metrics import MetricSource, PsutilMetricSource
from .network import primary_global_ipv4
from .updater import check_for_update, read_cron_context, self_update

__all__ = [
    # Commands
    "run_command",
    # Metrics
    "MetricSource",
    "PsutilMetricSource",
    # Network
    "primary_global_ipv4",
    # Self-update
    "check_for_update",
    "read_cron_context",
    "self_update",
]
