"""
Unit tests for ConsoleNotificationSink adapter.

Tests verify the console sink implements NotificationSink protocol
and logs new sign-ups without any credential material.
"""

import logging
from datetime import datetime, timezone

import pytest

from src.adapters.notify.console import ConsoleNotificationSink
from src.domain.models import Account, Notification


@pytest.fixture
def notification() -> Notification:
    created = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    account = Account(
        id="42",
        name="Ada",
        email="ada@x.com",
        extra="",
        created_at=created,
        credential_derivative="f" * 64,
    )
    return Notification.for_account(account, created)


class TestConsoleNotificationSinkProtocol:
    """Tests for NotificationSink protocol compliance."""

    def test_implements_notification_sink_protocol(self) -> None:
        from src.domain.ports import NotificationSink

        sink = ConsoleNotificationSink()
        assert callable(sink.publish)

        def accepts_sink(s: NotificationSink) -> None:
            pass

        accepts_sink(sink)

    def test_no_explicit_inheritance(self) -> None:
        """ConsoleNotificationSink uses structural subtyping, not inheritance."""
        bases = ConsoleNotificationSink.__bases__
        assert bases == (object,), f"Expected only object as base, got {bases}"


class TestPublish:
    """Tests for publish method."""

    def test_publish_logs_once_at_info(self, notification: Notification, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            ConsoleNotificationSink().publish(notification)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO

    def test_publish_format(self, notification: Notification, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            ConsoleNotificationSink().publish(notification)

        assert "[NOTIFICATION] n_42: New user signed up" in caplog.text
        assert "Name: Ada" in caplog.text
        assert "Email: ada@x.com" in caplog.text
        assert "Extra: -" in caplog.text

    def test_publish_never_logs_credential(
        self, notification: Notification, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            ConsoleNotificationSink().publish(notification)

        assert "f" * 64 not in caplog.text

    def test_publish_returns_none(self, notification: Notification) -> None:
        assert ConsoleNotificationSink().publish(notification) is None
