"""
Host metric sources.

This module provides:
- MetricSource: the abstract interface every check reads host state through.
- PsutilMetricSource: the implementation backed by the psutil library.
"""

import logging
import socket
import time
from abc import ABC, abstractmethod
from typing import List, Optional

import psutil

from ..models.snapshot import DiskUsage, LoadAverage, MemoryUsage, ProcessInfo
from ..validation import SamplingError
from .network import primary_global_ipv4

logger = logging.getLogger(__name__)


class MetricSource(ABC):
    """
    Abstract read-only provider of host metrics.

    Implementations should return fresh values on every call; nothing is
    cached between calls.
    """

    @abstractmethod
    def cpu_count(self) -> int:
        """Number of logical CPUs."""

    @abstractmethod
    def load_average(self) -> LoadAverage:
        """Current 1, 5 and 15 minute load averages."""

    @abstractmethod
    def disks(self) -> List[DiskUsage]:
        """Usage of every mounted filesystem."""

    @abstractmethod
    def memory(self) -> MemoryUsage:
        """System memory usage."""

    @abstractmethod
    def all_processes(self) -> List[ProcessInfo]:
        """Every process visible to the agent."""

    @abstractmethod
    def uptime(self) -> float:
        """Seconds since the host booted."""

    @abstractmethod
    def hostname(self) -> str:
        """The host's name."""

    def processes_by_name(self, name: str) -> List[ProcessInfo]:
        """
        Processes whose name contains ``name``.

        Matching is by substring, so ``mysqld`` also matches ``mysqld_safe``.
        """
        return [p for p in self.all_processes() if name in p.name]

    def primary_address(self) -> Optional[str]:
        """The primary global IPv4 address, if the host has one."""
        return None


class PsutilMetricSource(MetricSource):
    """
    MetricSource reading the local host through psutil.
    """

    # Attributes pre-fetched by psutil.process_iter for each process.
    _iter_attrs = ["pid", "name", "memory_info"]

    def cpu_count(self) -> int:
        count = psutil.cpu_count(logical=True)
        if not count:
            raise SamplingError("cpu count", "psutil could not determine the number of CPUs")
        logger.debug(f"Detected {count} logical CPUs")
        return count

    def load_average(self) -> LoadAverage:
        one, five, fifteen = psutil.getloadavg()
        load = LoadAverage(one=one, five=five, fifteen=fifteen)
        logger.debug(f"Load average: {load}")
        return load

    def disks(self) -> List[DiskUsage]:
        usages = []
        seen = set()
        for partition in psutil.disk_partitions(all=True):
            mount = partition.mountpoint
            if mount in seen:
                continue
            seen.add(mount)
            try:
                usage = psutil.disk_usage(mount)
            except OSError as e:
                logger.debug(f"Skipping mount {mount}: {type(e).__name__}: {e}")
                continue
            usages.append(
                DiskUsage(mount_path=mount, available_bytes=usage.free, total_bytes=usage.total)
            )
        logger.debug(f"Disks: {usages}")
        return usages

    def memory(self) -> MemoryUsage:
        vm = psutil.virtual_memory()
        usage = MemoryUsage(
            available_bytes=vm.available, total_bytes=vm.total, used_bytes=vm.used
        )
        logger.debug(f"Memory: {usage}")
        return usage

    def all_processes(self) -> List[ProcessInfo]:
        processes = []
        for proc in psutil.process_iter(attrs=self._iter_attrs, ad_value=None):
            info = proc.info
            name = info.get("name")
            if not name:
                continue
            memory_info = info.get("memory_info")
            processes.append(
                ProcessInfo(
                    pid=info["pid"],
                    name=name,
                    resident_bytes=memory_info.rss if memory_info is not None else 0,
                )
            )
        return processes

    def uptime(self) -> float:
        return time.time() - psutil.boot_time()

    def hostname(self) -> str:
        return socket.gethostname()

    def primary_address(self) -> Optional[str]:
        return primary_global_ipv4()
