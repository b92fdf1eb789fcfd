"""Unit tests for NotificationFeed."""

import asyncio
import json

from src.adapters.storage.memory import InMemoryStateStore
from src.domain.dashboard import Dashboard
from src.domain.ports import NOTIFICATIONS_KEY


class TestClear:
    def test_clear_empties_feed_and_keeps_accounts(self, dashboard: Dashboard) -> None:
        for name in ("Ada", "Bob"):
            asyncio.run(dashboard.registration.submit(name, f"{name}@x.com", "pw"))
        accounts_before = dashboard.registry.views()

        dashboard.feed.clear()

        assert dashboard.feed.entries() == []
        assert dashboard.registry.views() == accounts_before

    def test_clear_persists_empty_collection(self, dashboard: Dashboard, store: InMemoryStateStore) -> None:
        asyncio.run(dashboard.registration.submit("Ada", "ada@x.com", "pw"))

        dashboard.feed.clear()

        assert json.loads(store.raw(NOTIFICATIONS_KEY)) == []

    def test_clear_on_empty_feed(self, dashboard: Dashboard, store: InMemoryStateStore) -> None:
        dashboard.feed.clear()

        assert len(dashboard.feed) == 0
        assert store.raw(NOTIFICATIONS_KEY) == "[]"

    def test_entries_returns_copy(self, dashboard: Dashboard) -> None:
        asyncio.run(dashboard.registration.submit("Ada", "ada@x.com", "pw"))

        dashboard.feed.entries().clear()

        assert len(dashboard.feed) == 1
