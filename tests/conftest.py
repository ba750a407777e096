"""
Pytest configuration and shared fixtures for the sysalert test suite.

This module provides common fixtures, a fake metric source and
configuration helpers for all test modules.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sysalert.models.config import (  # noqa: E402
    LoadAverageLimits,
    ProcessCheckToggles,
    ResolvedConfig,
    TelegramIdentity,
)
from sysalert.models.snapshot import (  # noqa: E402
    DiskUsage,
    LoadAverage,
    MemoryUsage,
    MetricSnapshot,
    ProcessInfo,
)
from sysalert.system.metrics import MetricSource  # noqa: E402

GIB = 1024 ** 3


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


# ============================================================================
# Fake Metric Source
# ============================================================================


class FakeMetricSource(MetricSource):
    """
    MetricSource serving fixed values, healthy by default.

    Set ``failures[<method name>]`` to an exception to make that method raise.
    """

    def __init__(
        self,
        cpus: int = 4,
        load: LoadAverage = LoadAverage(0.5, 0.5, 0.5),
        disks: Optional[List[DiskUsage]] = None,
        memory: MemoryUsage = MemoryUsage(
            available_bytes=8 * GIB, total_bytes=16 * GIB, used_bytes=8 * GIB
        ),
        processes: Optional[List[ProcessInfo]] = None,
        uptime: float = 86400.0,
        hostname: str = "web-01",
        address: Optional[str] = "203.0.113.10",
    ):
        self.cpus = cpus
        self.load = load
        self.disk_list = disks if disks is not None else [
            DiskUsage("/", available_bytes=50 * GIB, total_bytes=100 * GIB),
        ]
        self.memory_usage = memory
        self.processes = processes if processes is not None else [
            ProcessInfo(pid=100, name="nginx", resident_bytes=50 * 1024 ** 2),
            ProcessInfo(pid=200, name="mysqld", resident_bytes=2 * GIB),
        ]
        self.uptime_seconds = uptime
        self.host = hostname
        self.address = address
        self.failures: Dict[str, Exception] = {}
        self.calls: List[str] = []

    def _record(self, method: str) -> None:
        self.calls.append(method)
        if method in self.failures:
            raise self.failures[method]

    def cpu_count(self) -> int:
        self._record("cpu_count")
        return self.cpus

    def load_average(self) -> LoadAverage:
        self._record("load_average")
        return self.load

    def disks(self) -> List[DiskUsage]:
        self._record("disks")
        return list(self.disk_list)

    def memory(self) -> MemoryUsage:
        self._record("memory")
        return self.memory_usage

    def all_processes(self) -> List[ProcessInfo]:
        self._record("all_processes")
        return list(self.processes)

    def uptime(self) -> float:
        self._record("uptime")
        return self.uptime_seconds

    def hostname(self) -> str:
        self._record("hostname")
        return self.host

    def primary_address(self) -> Optional[str]:
        self._record("primary_address")
        return self.address


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def make_source():
    """Factory for FakeMetricSource with custom values."""
    return FakeMetricSource


@pytest.fixture
def fake_source():
    """A healthy 4-CPU host."""
    return FakeMetricSource()


@pytest.fixture
def snapshot(fake_source):
    return MetricSnapshot(fake_source)


@pytest.fixture
def heartbeat_file(temp_dir):
    """A freshly touched heartbeat file."""
    path = temp_dir / "backup.heartbeat"
    path.touch()
    return path


@pytest.fixture
def resolved_config():
    """ResolvedConfig with the defaults a 4-CPU host would get."""
    return ResolvedConfig(
        identity=TelegramIdentity(token="123456:secret-token", chat_id="-1001"),
        load_average_max=LoadAverageLimits(one=4.0, five=4.0, fifteen=4.0),
        disk_min_free_ratio=0.05,
        watched_mounts=("/",),
        memory_min_free_ratio=0.05,
        process_checks=ProcessCheckToggles(),
        self_update_enabled=False,
    )


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """A complete configuration document."""
    return {
        "telegram_token": "123456:secret-token",
        "telegram_chat_id": "-1001",
        "disable_self_update": True,
        "memory": {"minimum": 0.1},
        "disks": {"disks": ["/", "/data"], "minimum": 0.1},
        "load_average": {"one": 8.0, "five": 6.0, "fifteen": 4.0},
        "process_checks": {
            "disable_web_server_check": False,
            "disable_mysql_check": True,
            "disable_mysql_memory_check": False,
        },
    }


@pytest.fixture
def minimal_config_data() -> Dict[str, Any]:
    """Only the required identity fields."""
    return {"telegram_token": "123456:secret-token", "telegram_chat_id": "-1001"}


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Write the sample configuration to a TOML file."""
    import toml

    path = temp_dir / "sysalert.toml"
    with open(path, "w") as f:
        toml.dump(sample_config_data, f)
    return path


@pytest.fixture
def write_config(temp_dir):
    """Return a helper that writes arbitrary TOML text to a config file."""
    def _write(text: str, name: str = "sysalert.toml") -> Path:
        path = temp_dir / name
        path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically clear configuration cache after each test."""
    yield

    from sysalert.config import set_config_path

    set_config_path(None)
