"""Uptime floor check."""

from datetime import timedelta
from typing import List

from ..models.results import Finding, Operator
from ..models.snapshot import MetricSnapshot
from .base import AbstractCheck, collect, check_value

MIN_UPTIME = timedelta(minutes=10)


class UptimeFloorCheck(AbstractCheck):
    """Flags a host that rebooted within the last few minutes."""

    label = "uptime"

    def __init__(self, minimum: timedelta = MIN_UPTIME):
        self.minimum = minimum

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        return collect(check_value(
            self.label,
            int(snapshot.uptime()),
            Operator.LT,
            int(self.minimum.total_seconds()),
        ))
