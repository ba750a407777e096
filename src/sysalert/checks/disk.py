"""Disk free-space checks."""

import logging
from typing import List

from ..models.results import Finding, Operator
from ..models.snapshot import MetricSnapshot
from .base import AbstractCheck, collect, check_value

logger = logging.getLogger(__name__)


class DiskFreeCheck(AbstractCheck):
    """
    Flags a watched mount whose free ratio drops below the minimum.

    The mount path is matched by exact string equality against the mount
    points the host reports. A watched mount that is not present on the
    host is skipped without a Finding.
    """

    def __init__(self, mount_path: str, min_free_ratio: float):
        self.mount_path = mount_path
        self.min_free_ratio = min_free_ratio
        self.label = mount_path

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        for disk in snapshot.disks():
            if disk.mount_path == self.mount_path:
                return collect(
                    check_value(self.label, disk.free_ratio, Operator.LT, self.min_free_ratio)
                )
        logger.debug(f"Watched mount {self.mount_path} not present on this host, skipping")
        return []
