"""
Command execution utilities.
"""

import logging
import shlex
import subprocess
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def run_command(
    command: List[str], timeout: Optional[float] = None
) -> Tuple[int, str, str]:
    """Execute a command and capture its output with robust error handling.

    Args:
        command: The command and its arguments.
        timeout: Seconds to wait before giving up, None to wait indefinitely.

    Returns:
        Tuple of (return_code, stdout_string, stderr_string).
        return_code is -1 for execution errors.

    Note:
        Uses UTF-8 encoding with error replacement for robust text handling.
    """
    printable = shlex.join(command)
    logger.debug(f"Executing command: '{printable}'")
    try:
        process = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
        return process.returncode, process.stdout, process.stderr
    except FileNotFoundError as e:
        logger.error(f"Command not found: {command[0]}: {type(e).__name__}: {e}")
        return -1, "", f"Error: Command not found '{command[0]}'"
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout}s: '{printable}'")
        return -1, "", f"Error: Command timed out after {timeout}s"
    except Exception as e:
        logger.error(
            f"Unexpected error while running command '{printable[:50]}...': {type(e).__name__}: {e}",
            exc_info=True,
        )
        return -1, "", f"An unexpected error occurred: {e}"
