"""
Console notification sink adapter - Implements NotificationSink protocol.

This module provides a console-based implementation of the domain's
reviewer notification port, logging new sign-ups for demo purposes.
"""

import logging

from src.domain.models import Notification

logger = logging.getLogger(__name__)


class ConsoleNotificationSink:
    """
    Implements NotificationSink protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Only payload fields are logged; the payload type has no credential field.
    """

    def publish(self, notification: Notification) -> None:
        """
        Log a new sign-up notification (simulates alerting the reviewer).

        Args:
            notification: Redacted notification built by the registration engine
        """
        payload = notification.payload
        logger.info(
            "[NOTIFICATION] %s: %s Name: %s Email: %s Extra: %s",
            notification.id,
            notification.title,
            payload.name,
            payload.email,
            payload.extra or "-",
        )
