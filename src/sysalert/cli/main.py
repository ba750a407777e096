"""
Command-line interface for the sysalert health-check agent.

One invocation performs one evaluation pass:

1. Load and resolve the configuration (fatal on failure, exit code 1)
2. Optionally self-update and announce the new version
3. Run every check against the local host
4. Format the Findings and deliver them as one alert

A detected problem or a failed delivery still exits with status 0; periodic
execution is left to an external scheduler such as cron.

Usage:
    sysalert [--config PATH] [--log-level LEVEL] [--dry-run] [--no-self-update]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..alerting import TelegramNotifier, deliver, format_alert, format_update_notice
from ..config import get_config, get_config_info, set_config_path
from ..models.snapshot import MetricSnapshot
from ..monitoring import CheckEngine
from ..system import PsutilMetricSource, read_cron_context, self_update
from ..validation import ConfigError, ErrorSeverity, handle_cli_error, handle_error

# --- Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysalert",
        description="Check host health and send one consolidated alert.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="Configuration file. Defaults to $CONFIG, then sysalert.toml.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the alert instead of sending it.",
    )
    parser.add_argument(
        "--no-self-update",
        action="store_true",
        help="Skip the self-update step for this run.",
    )
    return parser


def _announce_update(
    notifier: TelegramNotifier, hostname: str, address: str, dry_run: bool
) -> None:
    try:
        version = self_update(__version__)
    except Exception as e:
        handle_error(e, "self-update", severity=ErrorSeverity.WARNING, reraise=False, logger=logger)
        return
    if version is None:
        return

    notice = format_update_notice(hostname, address, version, read_cron_context())
    if dry_run:
        print(notice)
    else:
        deliver(notifier, notice)


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for sysalert.

    Raises:
        SystemExit: With status 1 when the configuration cannot be loaded.
    """
    args = build_parser().parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    logger.info(f"sysalert v{__version__}")

    if args.config:
        set_config_path(Path(args.config))

    source = PsutilMetricSource()
    try:
        config = get_config(source)
    except ConfigError as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            logger=logger,
        )
    logger.debug(f"Configuration state: {get_config_info()}")

    snapshot = MetricSnapshot(source)
    hostname = snapshot.hostname
    address = snapshot.address
    logger.info(f"Checking host {hostname} ({address})")

    notifier = TelegramNotifier(config.identity)

    if config.self_update_enabled and not args.no_self_update:
        _announce_update(notifier, hostname, address, args.dry_run)

    findings = CheckEngine.from_config(config).run(snapshot)

    message = format_alert(hostname, address, findings)
    if message is None:
        logger.info("All checks passed, no alert to send")
        return

    if args.dry_run:
        print(message)
        return

    deliver(notifier, message)


if __name__ == "__main__":
    main_cli()
