"""
Point-in-time metric data models.

Each dataclass holds one slice of host state as returned by a MetricSource.
MetricSnapshot is a read-only view that samples each slice on demand, so two
slices read by different checks may come from slightly different instants.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, TypeVar

from ..validation import SamplingError

if TYPE_CHECKING:
    from ..system.metrics import MetricSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN = "unknown"


@dataclass(frozen=True)
class LoadAverage:
    """1, 5 and 15 minute load averages."""

    one: float
    five: float
    fifteen: float


@dataclass(frozen=True)
class DiskUsage:
    """Space on one mounted filesystem, in bytes."""

    mount_path: str
    available_bytes: int
    total_bytes: int

    @property
    def free_ratio(self) -> float:
        if self.total_bytes <= 0:
            raise SamplingError(self.mount_path, "reported total size is zero")
        return self.available_bytes / self.total_bytes


@dataclass(frozen=True)
class MemoryUsage:
    """
    System memory, in bytes.

    ``available_bytes`` is what the OS reports as available for new
    allocations; some backends report zero here because they do not expose
    "available" separately from "free".
    """

    available_bytes: int
    total_bytes: int
    used_bytes: int

    @property
    def reports_available(self) -> bool:
        return self.available_bytes > 0

    @property
    def free_ratio(self) -> float:
        """
        Fraction of memory still free.

        Uses ``available / total`` when the backend reports available memory,
        otherwise approximates it as ``(total - used) / total``.
        """
        if self.total_bytes <= 0:
            raise SamplingError("memory", "reported total memory is zero")
        if self.reports_available:
            return self.available_bytes / self.total_bytes
        return (self.total_bytes - self.used_bytes) / self.total_bytes


@dataclass(frozen=True)
class ProcessInfo:
    """A running process and its resident memory."""

    pid: int
    name: str
    resident_bytes: int


class MetricSnapshot:
    """
    Lazy, read-only view of host metrics.

    Every accessor queries the underlying source when called and wraps any
    failure in a SamplingError naming the metric, so the caller can report
    the failure without losing the other checks.
    """

    def __init__(self, source: "MetricSource"):
        self.source = source

    def _sample(self, metric: str, read: Callable[[], T]) -> T:
        try:
            return read()
        except SamplingError:
            raise
        except Exception as e:
            raise SamplingError(metric, f"{type(e).__name__}: {e}") from e

    def cpu_count(self) -> int:
        return self._sample("cpu count", self.source.cpu_count)

    def load_average(self) -> LoadAverage:
        return self._sample("load average", self.source.load_average)

    def disks(self) -> List[DiskUsage]:
        return self._sample("disks", self.source.disks)

    def memory(self) -> MemoryUsage:
        return self._sample("memory", self.source.memory)

    def processes_by_name(self, name: str) -> List[ProcessInfo]:
        return self._sample(f"processes {name}", lambda: self.source.processes_by_name(name))

    def all_processes(self) -> List[ProcessInfo]:
        return self._sample("processes", self.source.all_processes)

    def uptime(self) -> float:
        return self._sample("uptime", self.source.uptime)

    @property
    def hostname(self) -> str:
        """Best-effort hostname, ``unknown`` when it cannot be read."""
        try:
            return self.source.hostname() or UNKNOWN
        except Exception as e:
            logger.warning(f"Could not read hostname: {type(e).__name__}: {e}")
            return UNKNOWN

    @property
    def address(self) -> str:
        """Best-effort primary global IPv4 address, ``unknown`` when none is found."""
        try:
            return self.source.primary_address() or UNKNOWN
        except Exception as e:
            logger.warning(f"Could not read primary address: {type(e).__name__}: {e}")
            return UNKNOWN
