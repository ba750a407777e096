"""
Defines the base structures for health checks.

This module provides:
- check_value: the shared compare-and-record primitive every check uses.
- sampling_failure: the Finding reported when a check cannot read its metric.
- AbstractCheck: the interface all check implementations adhere to.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.results import Finding, Operator, Value
from ..models.snapshot import MetricSnapshot

logger = logging.getLogger(__name__)


def check_value(
    label: str, observed: Value, operator: Operator, threshold: Value
) -> Optional[Finding]:
    """
    Compare a sampled value against its threshold.

    Args:
        label: Name of the checked quantity, shown in the alert
        observed: The sampled value
        operator: Comparison that signals a violation when it holds
        threshold: The limit to compare against

    Returns:
        A Finding when ``observed <operator> threshold`` holds, otherwise None.
    """
    violated = operator.holds(observed, threshold)
    logger.debug(
        f"{label}: {observed!r} {operator.value} {threshold!r} -> "
        f"{'violated' if violated else 'ok'}"
    )
    if not violated:
        return None
    return Finding(label=label, observed=observed, operator=operator, threshold=threshold)


def sampling_failure(label: str, error: Exception) -> Finding:
    """Finding describing a check that could not obtain its metric."""
    return Finding(
        label=f"{label} unavailable",
        observed=str(error),
        operator=Operator.EQ,
        threshold="error",
        detail=str(error),
    )


class AbstractCheck(ABC):
    """
    Abstract base class for health checks.

    Each check owns its threshold and comparison direction, reads only the
    slice of the snapshot it needs, and returns the Findings it produced.
    Checks never mutate the snapshot or the configuration.
    """

    # Short name used in logs and in sampling-failure Findings.
    label: str = "check"

    @abstractmethod
    def evaluate(self, snapshot: MetricSnapshot) -> List[Finding]:
        """
        Sample the metric and compare it against the threshold.

        Returns:
            Zero or more Findings, in the order the violations were observed.

        Raises:
            SamplingError: If the metric could not be read.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.label!r})"


def collect(*findings: Optional[Finding]) -> List[Finding]:
    """Drop the Nones from a series of check_value results."""
    return [f for f in findings if f is not None]
