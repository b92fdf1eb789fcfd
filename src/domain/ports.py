"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Any, Protocol

from .models import Notification

ACCOUNTS_KEY = "accounts"
NOTIFICATIONS_KEY = "notifications"


class StateStore(Protocol):
    """Port interface for the key-value persistence of whole collections."""

    def load(self, key: str) -> list[dict[str, Any]] | None:
        """
        Load a stored collection.

        Args:
            key: Collection key (ACCOUNTS_KEY or NOTIFICATIONS_KEY)

        Returns:
            The stored records in stored order, or None if nothing was saved

        Raises:
            PersistenceCorrupt: Stored value is not a JSON list of objects
            PersistenceUnavailable: The backing store could not be read
        """
        ...

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        """
        Replace a stored collection with the given records.

        Args:
            key: Collection key
            records: JSON-serialisable records, most-recent-first

        Raises:
            PersistenceUnavailable: The backing store rejected the write
        """
        ...

    def ping(self) -> None:
        """
        Check the backing store is reachable.

        Raises:
            PersistenceUnavailable: The store cannot be reached
        """
        ...


class NotificationSink(Protocol):
    """Port interface for delivering new notifications to the reviewer."""

    def publish(self, notification: Notification) -> None:
        """
        Deliver a freshly created notification.

        Args:
            notification: Redacted notification (payload carries no credential)
        """
        ...
