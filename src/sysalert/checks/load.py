"""Load average checks."""

from typing import List

from ..models.results import Finding, Operator
from ..models.snapshot import MetricSnapshot
from .base import AbstractCheck, collect, check_value

# Component attribute -> window length in minutes, used for the label.
WINDOWS = {"one": 1, "five": 5, "fifteen": 15}


class LoadAverageCheck(AbstractCheck):
    """Flags one load average window exceeding its ceiling."""

    def __init__(self, component: str, ceiling: float):
        if component not in WINDOWS:
            raise ValueError(f"Unknown load average component: {component}")
        self.component = component
        self.ceiling = ceiling
        self.label = f"load {WINDOWS[component]}"

    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        observed = getattr(snapshot.load_average(), self.component)
        return collect(check_value(self.label, observed, Operator.GT, self.ceiling))
