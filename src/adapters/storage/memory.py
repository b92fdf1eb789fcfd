"""
In-memory state store adapter - Implements StateStore protocol.

Keeps each collection as JSON text, the way a browser key-value store would,
so anything saved here is guaranteed to survive a JSON round trip.
Default backend for demos and tests; contents are lost on restart.
"""

import json
from typing import Any

from src.domain.exceptions import PersistenceCorrupt, PersistenceUnavailable
from src.domain.persistence import validate_collection


class InMemoryStateStore:
    """Implements StateStore protocol with a dict of JSON strings."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """
        Args:
            initial: Optional raw JSON text per key, used to seed the store
        """
        self._data: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> list[dict[str, Any]] | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceCorrupt(f"Collection {key!r} is not valid JSON") from e
        return validate_collection(key, value)

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        try:
            self._data[key] = json.dumps(records)
        except (TypeError, ValueError) as e:
            raise PersistenceUnavailable(f"Collection {key!r} is not JSON-serialisable") from e

    def raw(self, key: str) -> str | None:
        """Stored JSON text for a key, as written."""
        return self._data.get(key)

    def ping(self) -> None:
        return None
