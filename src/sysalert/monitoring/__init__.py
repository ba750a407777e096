"""
Check orchestration for the sysalert package.

This module builds the ordered check list and runs one evaluation pass.
"""

from .engine import CheckEngine, build_checks, run_checks

__all__ = [
    "CheckEngine",
    "build_checks",
    "run_checks",
]
