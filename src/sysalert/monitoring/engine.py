"""
Check engine.

This module builds the fixed, ordered list of checks from a ResolvedConfig
and runs them against a MetricSnapshot. Checks run sequentially; a check that
fails to sample its metric contributes a failure Finding and the remaining
checks still run.
"""

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from ..checks import (
    DATABASE_PROCESSES,
    HEARTBEAT_FILE,
    WEB_SERVER_PROCESSES,
    AbstractCheck,
    DiskFreeCheck,
    DuplicateProcessCheck,
    HeartbeatFreshnessCheck,
    LoadAverageCheck,
    MemoryFreeCheck,
    ProcessMemoryShareCheck,
    ProcessPresenceCheck,
    UptimeFloorCheck,
    sampling_failure,
)
from ..models.config import ResolvedConfig
from ..models.results import Finding
from ..models.snapshot import MetricSnapshot
from ..validation import SamplingError

logger = logging.getLogger(__name__)


def build_checks(
    config: ResolvedConfig,
    heartbeat_path: Union[str, Path] = HEARTBEAT_FILE,
    clock: Callable[[], float] = time.time,
) -> List[AbstractCheck]:
    """
    Create the checks for a resolved configuration in evaluation order.

    Order: load, disks, memory, process presence, process memory,
    duplicate process, heartbeat, uptime. Disabled process categories are
    left out entirely.

    Args:
        config: Resolved configuration holding every threshold
        heartbeat_path: Heartbeat file to inspect
        clock: Source of the current time for the heartbeat age

    Returns:
        Ordered list of checks
    """
    limits = config.load_average_max
    checks: List[AbstractCheck] = [
        LoadAverageCheck("one", limits.one),
        LoadAverageCheck("five", limits.five),
        LoadAverageCheck("fifteen", limits.fifteen),
    ]

    checks.extend(
        DiskFreeCheck(mount, config.disk_min_free_ratio) for mount in config.watched_mounts
    )

    checks.append(MemoryFreeCheck(config.memory_min_free_ratio))

    toggles = config.process_checks
    if toggles.web_server:
        checks.append(ProcessPresenceCheck(WEB_SERVER_PROCESSES))
    if toggles.database:
        checks.append(ProcessPresenceCheck(DATABASE_PROCESSES))
    if toggles.database_memory:
        # mysqld before mariadbd, one check per binary name
        checks.extend(ProcessMemoryShareCheck(name) for name in reversed(DATABASE_PROCESSES))

    checks.append(DuplicateProcessCheck())
    checks.append(HeartbeatFreshnessCheck(heartbeat_path, clock=clock))
    checks.append(UptimeFloorCheck())
    return checks


class CheckEngine:
    """
    Runs an ordered set of checks and gathers their Findings.

    The engine never mutates the configuration and only reads from the
    snapshot. Findings keep check order; nothing is sorted or deduplicated.
    """

    def __init__(self, checks: Sequence[AbstractCheck]):
        self.checks = list(checks)

    @classmethod
    def from_config(cls, config: ResolvedConfig, **kwargs) -> "CheckEngine":
        """Build an engine with the standard check order for ``config``."""
        return cls(build_checks(config, **kwargs))

    def _evaluate(self, check: AbstractCheck, snapshot: MetricSnapshot) -> List[Finding]:
        try:
            return list(check.evaluate(snapshot))
        except SamplingError as e:
            logger.warning(f"Check {check.label} could not sample its metric: {e}")
            return [sampling_failure(check.label, e)]
        except Exception as e:
            logger.error(
                f"Unexpected error in check {check.label}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            return [sampling_failure(check.label, e)]

    def run(self, snapshot: MetricSnapshot) -> List[Finding]:
        """
        Evaluate every check against the snapshot.

        Returns:
            All Findings in check order; empty when the host is healthy.
        """
        findings: List[Finding] = []
        for check in self.checks:
            produced = self._evaluate(check, snapshot)
            for finding in produced:
                logger.info(f"Finding: {finding.render()}")
            findings.extend(produced)

        logger.info(f"Ran {len(self.checks)} checks, {len(findings)} findings")
        return findings


def run_checks(
    config: ResolvedConfig,
    snapshot: MetricSnapshot,
    heartbeat_path: Optional[Union[str, Path]] = None,
) -> List[Finding]:
    """Build the standard checks for ``config`` and run them once."""
    kwargs = {} if heartbeat_path is None else {"heartbeat_path": heartbeat_path}
    return CheckEngine.from_config(config, **kwargs).run(snapshot)
