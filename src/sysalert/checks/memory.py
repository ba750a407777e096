"""System memory check."""

import logging
from typing import List

from ..models.results import Finding, Operator
from ..models.snapshot import MetricSnapshot
from .base import AbstractCheck, collect, check_value

logger = logging.getLogger(__name__)


class MemoryFreeCheck(AbstractCheck):
    """Flags the free memory ratio dropping below the minimum."""

    label = "memory"

    def __init__(self, min_free_ratio: float):
        self.min_free_ratio = min_free_ratio

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        memory = snapshot.memory()
        if not memory.reports_available:
            logger.debug("Available memory reported as zero, using (total - used) / total")
        return collect(
            check_value(self.label, memory.free_ratio, Operator.LT, self.min_free_ratio)
        )
