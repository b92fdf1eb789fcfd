"""
Write-through helpers shared by the account registry and the feed.

Loading happens once at startup; a corrupt collection is logged and replaced
by an empty one. Writes are best-effort: the in-memory collection stays
authoritative when the store rejects a write.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .exceptions import PersistenceCorrupt, PersistenceUnavailable
from .ports import StateStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_collection(store: StateStore, key: str, parse: Callable[[Any], T]) -> list[T]:
    """
    Load and decode a collection, resetting it to empty if it is corrupt.

    PersistenceUnavailable is not handled here: an unreachable store at
    startup is an environment error, not a data error.
    """
    try:
        records = store.load(key)
        if records is None:
            return []
        return [parse(record) for record in records]
    except PersistenceCorrupt as e:
        logger.warning("Stored collection %r is corrupt, starting empty: %s", key, e)
        return []


def write_through(store: StateStore, key: str, records: list[dict[str, Any]]) -> None:
    """Save a full collection; failures are logged, never raised."""
    try:
        store.save(key, records)
    except PersistenceUnavailable:
        logger.exception("Failed to persist collection %r (%s records)", key, len(records))


def validate_collection(key: str, value: Any) -> list[dict[str, Any]]:
    """Check a decoded collection is a list of JSON objects."""
    if not isinstance(value, list):
        raise PersistenceCorrupt(f"Collection {key!r} is {type(value).__name__}, expected list")
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise PersistenceCorrupt(f"Collection {key!r} item {index} is not an object")
    return value
