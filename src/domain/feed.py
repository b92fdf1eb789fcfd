"""Feed controller - the reviewer-visible notification list."""

import logging

from .models import Notification
from .persistence import load_collection, write_through
from .ports import NOTIFICATIONS_KEY, StateStore

logger = logging.getLogger(__name__)


class NotificationFeed:
    """Most-recent-first notifications; cleared only as a whole."""

    def __init__(self, store: StateStore) -> None:
        self._store = store
        self._notifications: list[Notification] = []

    def load(self) -> None:
        self._notifications = load_collection(self._store, NOTIFICATIONS_KEY, Notification.from_record)
        logger.info("Loaded %s notification(s)", len(self._notifications))

    def __len__(self) -> int:
        return len(self._notifications)

    def entries(self) -> list[Notification]:
        return list(self._notifications)

    def add(self, notification: Notification) -> None:
        self._notifications.insert(0, notification)

    def clear(self) -> None:
        cleared = len(self._notifications)
        self._notifications = []
        logger.info("Cleared %s notification(s)", cleared)
        self.persist()

    def persist(self) -> None:
        write_through(
            self._store,
            NOTIFICATIONS_KEY,
            [notification.to_record() for notification in self._notifications],
        )
