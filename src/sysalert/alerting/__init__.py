"""
Alert formatting and delivery.
"""

from .formatter import (
    escape_code,
    escape_markdown,
    format_alert,
    format_update_notice,
)
from .notifier import AbstractNotifier, TelegramNotifier, deliver

__all__ = [
    "escape_code",
    "escape_markdown",
    "format_alert",
    "format_update_notice",
    "AbstractNotifier",
    "TelegramNotifier",
    "deliver",
]
