"""
Heartbeat file check.

An external periodic job (the backup) touches the heartbeat file each time
it finishes. A missing file, a timestamp that cannot be used, and a file
that has not been touched within the staleness window are reported as
three distinct Findings.
"""

import logging
import os
import time
from datetime import timedelta
from pathlib import Path
from typing import Callable, List, Union

from ..models.results import Finding, Operator
from ..models.snapshot import MetricSnapshot
from .base import AbstractCheck, collect, check_value

logger = logging.getLogger(__name__)

HEARTBEAT_FILE = Path("/tmp/backup.heartbeat")
# One daily run plus a quarter hour of slack.
MAX_HEARTBEAT_AGE = timedelta(hours=24, minutes=15)


class HeartbeatFreshnessCheck(AbstractCheck):
    """Flags a heartbeat file that is missing or older than the staleness window."""

    label = "heartbeat"

    def __init__(
        self,
        path: Union[str, Path] = HEARTBEAT_FILE,
        max_age: timedelta = MAX_HEARTBEAT_AGE,
        clock: Callable[[], float] = time.time,
    ):
        self.path = Path(path)
        self.max_age = max_age
        self.clock = clock

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        try:
            mtime = os.stat(self.path).st_mtime
        except OSError as e:
            return [Finding(
                label=f"{self.label} missing",
                observed=str(self.path),
                operator=Operator.EQ,
                threshold="unreadable",
                detail=f"{self.path}: {e.strerror or e}",
            )]

        age = self.clock() - mtime
        if mtime <= 0 or age < 0:
            return [Finding(
                label=f"{self.label} timestamp unsupported",
                observed=mtime,
                operator=Operator.EQ,
                threshold="unsupported",
                detail=f"{self.path} has no usable modification time",
            )]

        logger.debug(f"{self.path} last modified {age:.0f}s ago")
        return collect(check_value(
            f"{self.label} age",
            int(age),
            Operator.GT,
            int(self.max_age.total_seconds()),
        ))
