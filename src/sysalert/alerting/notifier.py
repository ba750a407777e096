"""
Alert delivery.

This module provides:
- AbstractNotifier: the interface for outbound alert channels.
- TelegramNotifier: delivery through the Telegram Bot API using requests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import requests

from ..models.config import TelegramIdentity
from ..validation import DeliveryError

logger = logging.getLogger(__name__)

TELEGRAM_API_URL = "https://api.telegram.org/bot{token}/sendMessage"


class AbstractNotifier(ABC):
    """An outbound channel for alert text."""

    @abstractmethod
    def send(self, text: str) -> None:
        """
        Deliver ``text``.

        Raises:
            DeliveryError: If the message was not accepted.
        """


class TelegramNotifier(AbstractNotifier):
    """
    Sends MarkdownV2 messages to a Telegram chat.

    No retries are attempted; a failed delivery raises DeliveryError and it
    is up to the caller to log it.
    """

    def __init__(
        self,
        identity: TelegramIdentity,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        self.identity = identity
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def url(self) -> str:
        return TELEGRAM_API_URL.format(token=self.identity.token)

    def send(self, text: str) -> None:
        payload = {
            "chat_id": self.identity.chat_id,
            "parse_mode": "MarkdownV2",
            "text": text,
        }
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            # The exception text can contain the URL, and with it the token.
            raise DeliveryError(
                f"Telegram request failed: {type(e).__name__}"
            ) from e

        if response.status_code != requests.codes.ok:
            raise DeliveryError(
                f"Telegram rejected message with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        logger.info(f"Alert delivered to chat {self.identity.chat_id}")


def deliver(notifier: AbstractNotifier, text: str) -> bool:
    """
    Send ``text`` and absorb delivery failures.

    Returns:
        True if the message was delivered, False if the failure was logged.
    """
    try:
        notifier.send(text)
    except DeliveryError as e:
        logger.error(f"Failed to deliver alert: {e}")
        return False
    return True
