"""
Self-update workflow.

Checks the package index for a newer sysalert release and upgrades the
installed package in place with pip. Failures are logged and reported as
"no update"; they never stop the health checks from running.
"""

import logging
import re
import sys
from pathlib import Path
from typing import Optional, Tuple

import requests

from .commands import run_command

logger = logging.getLogger(__name__)

PACKAGE_NAME = "sysalert"
INDEX_URL = "https://pypi.org/pypi/{package}/json"
CRONTAB_PATH = Path("/var/spool/cron/crontabs/root")
# Crontab lines mentioning this are included in the update notice.
CRON_KEYWORD = "b2"


def _version_key(version: str) -> Tuple[int, ...]:
    """Numeric release components of a version string: ``1.10.2rc1`` -> (1, 10, 2)."""
    key = []
    for part in version.split("."):
        match = re.match(r"\d+", part)
        if not match:
            break
        key.append(int(match.group()))
    return tuple(key)


def is_newer(candidate: str, current: str) -> bool:
    return _version_key(candidate) > _version_key(current)


def check_for_update(
    current_version: str,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
) -> Optional[str]:
    """
    Ask the package index for the latest release.

    Args:
        current_version: Version of the running package
        session: Optional requests session (defaults to module-level requests)
        timeout: Request timeout in seconds

    Returns:
        The latest version if it is newer than ``current_version``, else None.
    """
    http = session or requests
    url = INDEX_URL.format(package=PACKAGE_NAME)
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        latest = response.json()["info"]["version"]
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        logger.warning(f"Update check failed: {type(e).__name__}: {e}")
        return None

    if is_newer(latest, current_version):
        logger.info(f"Newer release available: {current_version} -> {latest}")
        return latest
    logger.debug(f"Running latest release {current_version} (index reports {latest})")
    return None


def apply_update(version: str) -> bool:
    """Install ``version`` of the package with pip. Returns True on success."""
    command = [
        sys.executable, "-m", "pip", "install", "--upgrade", "--quiet",
        f"{PACKAGE_NAME}=={version}",
    ]
    return_code, _stdout, stderr = run_command(command, timeout=300)
    if return_code != 0:
        logger.warning(f"Upgrade to {version} failed (exit {return_code}): {stderr.strip()}")
        return False
    logger.info(f"Upgraded {PACKAGE_NAME} to {version}")
    return True


def read_cron_context(path: Path = CRONTAB_PATH, keyword: str = CRON_KEYWORD) -> str:
    """Crontab lines mentioning ``keyword``, or the read error text."""
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return str(e)
    return "\n".join(line for line in content.splitlines() if keyword in line)


def self_update(current_version: str, session: Optional[requests.Session] = None) -> Optional[str]:
    """
    Run the whole update workflow.

    Returns:
        The version that was installed, or None if nothing changed.
    """
    latest = check_for_update(current_version, session=session)
    if latest is None:
        return None
    if not apply_update(latest):
        return None
    return latest
