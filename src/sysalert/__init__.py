"""
sysalert: host health-check agent.

Each run samples local system metrics, compares them with the configured
thresholds and sends one consolidated alert when anything is out of range.

The package is organized into specialized modules:
- config: Configuration loading, strict validation and default resolution
- models: Data structures for configuration, metric slices and Findings
- validation: Field validators and the error taxonomy
- system: Metric sources, network discovery, commands and self-update
- checks: One health check per metric kind
- monitoring: The check engine
- alerting: Message formatting and Telegram delivery
- cli: Command-line interface

Usage:
    From command line:
        sysalert [--config sysalert.toml] [--dry-run]

    Programmatically:
        from sysalert import CheckEngine, MetricSnapshot, PsutilMetricSource, get_config
        source = PsutilMetricSource()
        findings = CheckEngine.from_config(get_config(source)).run(MetricSnapshot(source))
"""

__version__ = "1.0.0"

# Main interfaces
from .config import clear_config_cache, get_config, load_config, set_config_path
from .monitoring import CheckEngine, run_checks
from .alerting import TelegramNotifier, format_alert
from .cli import main_cli

# Model classes for external use
from .models import (
    Finding,
    MetricSnapshot,
    Operator,
    RawConfig,
    ResolvedConfig,
)

# Errors
from .validation import ConfigError, DeliveryError, SamplingError, ValidationError

# System utilities
from .system import MetricSource, PsutilMetricSource

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "load_config",
    "set_config_path",
    "CheckEngine",
    "run_checks",
    "TelegramNotifier",
    "format_alert",
    "main_cli",
    # Models
    "Finding",
    "MetricSnapshot",
    "Operator",
    "RawConfig",
    "ResolvedConfig",
    # Errors
    "ConfigError",
    "DeliveryError",
    "SamplingError",
    "ValidationError",
    # System
    "MetricSource",
    "PsutilMetricSource",
]
