"""
Unit tests for Telegram delivery.
"""

from unittest.mock import MagicMock

import pytest
import requests

from sysalert.alerting import TelegramNotifier, deliver
from sysalert.models import TelegramIdentity
from sysalert.validation import DeliveryError


@pytest.fixture
def identity():
    return TelegramIdentity(token="123456:secret-token", chat_id="-1001")


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.post.return_value = MagicMock(status_code=200, text='{"ok":true}')
    return session


@pytest.mark.unit
class TestTelegramNotifier:
    """Test cases for TelegramNotifier.send."""

    def test_posts_markdown_message(self, identity, session):
        notifier = TelegramNotifier(identity, session=session, timeout=5)

        notifier.send("hello")

        session.post.assert_called_once_with(
            "https://api.telegram.org/bot123456:secret-token/sendMessage",
            json={"chat_id": "-1001", "parse_mode": "MarkdownV2", "text": "hello"},
            timeout=5,
        )

    def test_rejected_message(self, identity, session):
        session.post.return_value = MagicMock(status_code=400, text="can't parse entities")
        notifier = TelegramNotifier(identity, session=session)

        with pytest.raises(DeliveryError) as exc_info:
            notifier.send("bad *markup")

        assert exc_info.value.status_code == 400
        assert "can't parse entities" in str(exc_info.value)

    def test_network_error_does_not_leak_token(self, identity, session):
        session.post.side_effect = requests.ConnectionError(
            "Max retries exceeded with url: /bot123456:secret-token/sendMessage"
        )
        notifier = TelegramNotifier(identity, session=session)

        with pytest.raises(DeliveryError) as exc_info:
            notifier.send("hello")

        assert "secret-token" not in str(exc_info.value)
        assert "ConnectionError" in str(exc_info.value)

    def test_no_retry(self, identity, session):
        session.post.side_effect = requests.Timeout()
        notifier = TelegramNotifier(identity, session=session)

        with pytest.raises(DeliveryError):
            notifier.send("hello")

        assert session.post.call_count == 1


@pytest.mark.unit
class TestDeliver:
    """Test cases for the failure-absorbing deliver helper."""

    def test_success(self, identity, session):
        assert deliver(TelegramNotifier(identity, session=session), "hi") is True

    def test_failure_logged(self, identity, session, caplog):
        session.post.return_value = MagicMock(status_code=502, text="Bad Gateway")

        assert deliver(TelegramNotifier(identity, session=session), "hi") is False
        assert "Failed to deliver alert" in caplog.text
