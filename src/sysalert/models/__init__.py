"""
Data models for the health-check agent.

Configuration Models:
- RawConfig and its sections, as parsed from the TOML document
- ResolvedConfig, the immutable run-time configuration

Snapshot Models:
- Per-metric slices returned by a MetricSource
- MetricSnapshot, the lazy read-only view handed to checks

Result Models:
- Operator and Finding, one record per violated rule
"""

from .config import (
    LoadAverageLimits,
    ProcessCheckToggles,
    RawConfig,
    RawDisks,
    RawLoadAverage,
    RawMemory,
    RawProcessChecks,
    ResolvedConfig,
    TelegramIdentity,
)

from .snapshot import DiskUsage, LoadAverage, MemoryUsage, MetricSnapshot, ProcessInfo

from .results import Finding, Operator

__all__ = [
    # Configuration
    "LoadAverageLimits",
    "ProcessCheckToggles",
    "RawConfig",
    "RawDisks",
    "RawLoadAverage",
    "RawMemory",
    "RawProcessChecks",
    "ResolvedConfig",
    "TelegramIdentity",
    # Snapshot
    "DiskUsage",
    "LoadAverage",
    "MemoryUsage",
    "MetricSnapshot",
    "ProcessInfo",
    # Results
    "Finding",
    "Operator",
]
