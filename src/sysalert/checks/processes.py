"""
Process checks.

Process names are matched by substring, the same way the metric source
matches them, so ``mysqld`` also matches ``mysqld_safe``.
"""

import logging
from typing import List, Sequence

from ..models.results import Finding, Operator
from ..models.snapshot import MetricSnapshot
from .base import AbstractCheck, collect, check_value

logger = logging.getLogger(__name__)

WEB_SERVER_PROCESSES = ("apache2", "nginx")
DATABASE_PROCESSES = ("mariadbd", "mysqld")
# A single database process may use at most this share of system memory.
DATABASE_MEMORY_SHARE = 0.75
SINGLETON_WORKER = "b2"


class ProcessPresenceCheck(AbstractCheck):
    """
    Flags a service category with no running process.

    The category counts as running when any of its candidate names matches
    at least one process.
    """

    def __init__(self, names: Sequence[str]):
        self.names = tuple(names)
        self.label = f"{', '.join(self.names)} running"

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        running = sum(len(snapshot.processes_by_name(name)) for name in self.names)
        if running > 0:
            logger.info(f"{', '.join(self.names)} is running")
        return collect(check_value(self.label, running, Operator.EQ, 0))


class ProcessMemoryShareCheck(AbstractCheck):
    """
    Flags each matching process whose resident memory exceeds a share of
    total system memory. Instances are evaluated independently.
    """

    def __init__(self, name: str, max_share: float = DATABASE_MEMORY_SHARE):
        self.name = name
        self.max_share = max_share
        self.label = f"{name} memory"

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        processes = snapshot.processes_by_name(self.name)
        if not processes:
            return []
        ceiling = int(snapshot.memory().total_bytes * self.max_share)
        return collect(*(
            check_value(
                f"{self.label} (pid {process.pid})",
                process.resident_bytes,
                Operator.GT,
                ceiling,
            )
            for process in processes
        ))


class DuplicateProcessCheck(AbstractCheck):
    """Flags a singleton worker running more than once."""

    def __init__(self, name_substring: str = SINGLETON_WORKER, max_instances: int = 1):
        self.name_substring = name_substring
        self.max_instances = max_instances
        self.label = f"{name_substring} instances"

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        count = sum(
            1 for process in snapshot.all_processes() if self.name_substring in process.name
        )
        return collect(check_value(self.label, count, Operator.GT, self.max_instances))
