"""
Unit tests for the psutil-backed metric source.

psutil is patched out so the tests do not depend on the machine they run on.
"""

import socket
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from sysalert.models import DiskUsage, LoadAverage, MemoryUsage
from sysalert.system import PsutilMetricSource, primary_global_ipv4
from sysalert.validation import SamplingError


def _proc(pid, name, rss):
    memory_info = SimpleNamespace(rss=rss) if rss is not None else None
    return SimpleNamespace(info={"pid": pid, "name": name, "memory_info": memory_info})


def _addr(address, family=socket.AF_INET):
    return SimpleNamespace(family=family, address=address)


@pytest.mark.unit
class TestPsutilMetricSource:
    """Test cases for PsutilMetricSource."""

    @patch("sysalert.system.metrics.psutil")
    def test_cpu_count(self, mock_psutil):
        mock_psutil.cpu_count.return_value = 8

        assert PsutilMetricSource().cpu_count() == 8
        mock_psutil.cpu_count.assert_called_once_with(logical=True)

    @patch("sysalert.system.metrics.psutil")
    def test_cpu_count_unknown(self, mock_psutil):
        mock_psutil.cpu_count.return_value = None

        with pytest.raises(SamplingError):
            PsutilMetricSource().cpu_count()

    @patch("sysalert.system.metrics.psutil")
    def test_load_average(self, mock_psutil):
        mock_psutil.getloadavg.return_value = (1.5, 1.0, 0.5)

        assert PsutilMetricSource().load_average() == LoadAverage(1.5, 1.0, 0.5)

    @patch("sysalert.system.metrics.psutil")
    def test_disks_skip_duplicates_and_unreadable(self, mock_psutil):
        mock_psutil.disk_partitions.return_value = [
            SimpleNamespace(mountpoint="/"),
            SimpleNamespace(mountpoint="/"),
            SimpleNamespace(mountpoint="/mnt/stale"),
            SimpleNamespace(mountpoint="/data"),
        ]

        def disk_usage(mount):
            if mount == "/mnt/stale":
                raise PermissionError("denied")
            return SimpleNamespace(free=25, total=100)

        mock_psutil.disk_usage.side_effect = disk_usage

        disks = PsutilMetricSource().disks()

        assert disks == [DiskUsage("/", 25, 100), DiskUsage("/data", 25, 100)]
        mock_psutil.disk_partitions.assert_called_once_with(all=True)

    @patch("sysalert.system.metrics.psutil")
    def test_virtual_filesystem_root_reported(self, mock_psutil):
        mock_psutil.disk_partitions.return_value = [
            SimpleNamespace(mountpoint="/", fstype="overlay"),
            SimpleNamespace(mountpoint="/dev/shm", fstype="tmpfs"),
        ]
        mock_psutil.disk_usage.return_value = SimpleNamespace(free=3, total=100)

        disks = PsutilMetricSource().disks()

        assert DiskUsage("/", 3, 100) in disks

    @patch("sysalert.system.metrics.psutil")
    def test_memory(self, mock_psutil):
        mock_psutil.virtual_memory.return_value = SimpleNamespace(available=3, total=10, used=6)

        assert PsutilMetricSource().memory() == MemoryUsage(3, 10, 6)

    @patch("sysalert.system.metrics.psutil")
    def test_processes(self, mock_psutil):
        mock_psutil.process_iter.return_value = [
            _proc(1, "systemd", 4096),
            _proc(2, None, None),
            _proc(3, "mysqld", None),
        ]

        processes = PsutilMetricSource().all_processes()

        assert [(p.pid, p.name, p.resident_bytes) for p in processes] == [
            (1, "systemd", 4096),
            (3, "mysqld", 0),
        ]

    @patch("sysalert.system.metrics.psutil")
    def test_processes_by_name_substring(self, mock_psutil):
        mock_psutil.process_iter.return_value = [
            _proc(1, "mysqld_safe", 1),
            _proc(2, "mysqld", 1),
            _proc(3, "nginx", 1),
        ]

        assert [p.pid for p in PsutilMetricSource().processes_by_name("mysqld")] == [1, 2]

    @patch("sysalert.system.metrics.time")
    @patch("sysalert.system.metrics.psutil")
    def test_uptime(self, mock_psutil, mock_time):
        mock_psutil.boot_time.return_value = 1000.0
        mock_time.time.return_value = 1600.0

        assert PsutilMetricSource().uptime() == 600.0


@pytest.mark.unit
class TestPrimaryGlobalIpv4:
    """Test cases for primary address discovery."""

    @patch("sysalert.system.network.psutil")
    def test_skips_private_and_loopback(self, mock_psutil):
        mock_psutil.net_if_addrs.return_value = {
            "lo": [_addr("127.0.0.1")],
            "eth0": [_addr("fe80::1", family=socket.AF_INET6), _addr("10.0.0.5")],
            "eth1": [_addr("93.184.216.34"), _addr("1.1.1.1")],
        }

        assert primary_global_ipv4() == "93.184.216.34"

    @patch("sysalert.system.network.psutil")
    def test_no_global_address(self, mock_psutil):
        mock_psutil.net_if_addrs.return_value = {"eth0": [_addr("192.168.1.2")]}

        assert primary_global_ipv4() is None

    @patch("sysalert.system.network.psutil")
    def test_interface_listing_fails(self, mock_psutil):
        mock_psutil.net_if_addrs.side_effect = OSError("no netlink")

        assert primary_global_ipv4() is None
