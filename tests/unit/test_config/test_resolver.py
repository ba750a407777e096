"""
Unit tests for configuration resolution.

Tests that omitted settings are filled with host-derived or fixed defaults
and that explicit settings are kept.
"""

import dataclasses

import pytest

from sysalert.config.resolver import resolve_config
from sysalert.config.validators import validate_raw_config
from sysalert.validation import ConfigError


@pytest.mark.unit
class TestResolveConfig:
    """Test cases for resolve_config."""

    @pytest.mark.parametrize("cpus", [1, 4, 64])
    def test_load_average_defaults_to_cpu_count(self, minimal_config_data, make_source, cpus):
        raw = validate_raw_config(minimal_config_data)

        resolved = resolve_config(raw, make_source(cpus=cpus))

        limits = resolved.load_average_max
        assert (limits.one, limits.five, limits.fifteen) == (float(cpus),) * 3

    def test_fixed_defaults(self, minimal_config_data, make_source):
        raw = validate_raw_config(minimal_config_data)

        resolved = resolve_config(raw, make_source())

        assert resolved.disk_min_free_ratio == 0.05
        assert resolved.memory_min_free_ratio == 0.05
        assert resolved.watched_mounts == ("/",)
        assert resolved.self_update_enabled is True
        assert resolved.process_checks.web_server is True
        assert resolved.process_checks.database is True
        assert resolved.process_checks.database_memory is True

    def test_explicit_values_kept(self, sample_config_data, make_source):
        source = make_source(cpus=2)
        raw = validate_raw_config(sample_config_data)

        resolved = resolve_config(raw, source)

        assert resolved.load_average_max.one == 8.0
        assert resolved.load_average_max.five == 6.0
        assert resolved.load_average_max.fifteen == 4.0
        assert resolved.disk_min_free_ratio == 0.1
        assert resolved.memory_min_free_ratio == 0.1
        assert resolved.watched_mounts == ("/", "/data")
        assert resolved.self_update_enabled is False
        assert resolved.process_checks.database is False
        assert resolved.identity.chat_id == "-1001"
        # Every ceiling was configured, so the host is never asked.
        assert "cpu_count" not in source.calls

    def test_partial_load_average_fills_only_gaps(self, minimal_config_data, make_source):
        minimal_config_data["load_average"] = {"one": 10}
        source = make_source(cpus=3)
        raw = validate_raw_config(minimal_config_data)

        resolved = resolve_config(raw, source)

        assert resolved.load_average_max.one == 10.0
        assert resolved.load_average_max.five == 3.0
        assert resolved.load_average_max.fifteen == 3.0
        assert source.calls.count("cpu_count") == 1

    def test_cpu_count_failure_is_config_error(self, minimal_config_data, make_source):
        source = make_source()
        source.failures["cpu_count"] = RuntimeError("no cpus")
        raw = validate_raw_config(minimal_config_data)

        with pytest.raises(ConfigError) as exc_info:
            resolve_config(raw, source)

        assert "CPU count" in str(exc_info.value)

    def test_resolved_config_is_immutable(self, minimal_config_data, make_source):
        resolved = resolve_config(validate_raw_config(minimal_config_data), make_source())

        with pytest.raises(dataclasses.FrozenInstanceError):
            resolved.disk_min_free_ratio = 0.5

    def test_token_hidden_from_repr(self, minimal_config_data, make_source):
        resolved = resolve_config(validate_raw_config(minimal_config_data), make_source())

        assert "secret-token" not in repr(resolved)
        assert resolved.identity.masked_token == "***oken"
