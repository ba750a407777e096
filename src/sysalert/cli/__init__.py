"""
Command-line interface for the sysalert package.

This module provides the main CLI entry point for the health-check agent.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
