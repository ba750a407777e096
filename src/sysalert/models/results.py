"""
Check result data models.

A Finding is an immutable record of one violated rule. It renders as the
assertion that failed, e.g. ``memory: 0.0312 < 0.05``.
"""

import operator as _operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

Value = Union[int, float, str]


class Operator(Enum):
    """Comparison used by a rule; the value is the symbol shown in alerts."""

    GT = ">"
    LT = "<"
    EQ = "=="

    @property
    def compare(self) -> Callable[[Value, Value], bool]:
        return _COMPARATORS[self]

    def holds(self, observed: Value, threshold: Value) -> bool:
        """True when ``observed <op> threshold``."""
        return self.compare(observed, threshold)


_COMPARATORS = {
    Operator.GT: _operator.gt,
    Operator.LT: _operator.lt,
    Operator.EQ: _operator.eq,
}


def format_observed(value: Value) -> str:
    """Observed floats are shown to 4 decimal places."""
    if isinstance(value, float):
        return f"{value:.4f}"
    return str(value)


def format_threshold(value: Value) -> str:
    """Thresholds are shown in their shortest form: ``0.05``, ``4``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Finding:
    """
    One violated rule produced by a single check.

    Attributes:
        label: What was checked (``load 1``, ``/``, ``memory``, ...).
        observed: The sampled value.
        operator: The comparison that held.
        threshold: The configured or fixed limit.
        detail: Free text replacing the assertion when the check could not
            sample its value (missing file, unreadable metric).
    """

    label: str
    observed: Value
    operator: Operator
    threshold: Value
    detail: Optional[str] = None

    def render(self) -> str:
        if self.detail is not None:
            return f"{self.label}: {self.detail}"
        return (
            f"{self.label}: {format_observed(self.observed)} "
            f"{self.operator.value} {format_threshold(self.threshold)}"
        )

    def __str__(self) -> str:
        return self.render()
