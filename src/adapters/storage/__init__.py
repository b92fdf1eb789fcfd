"""State store adapters - key-value persistence implementations."""

from .memory import InMemoryStateStore
from .postgres import PostgresStateStore, run_migrations

__all__ = ["InMemoryStateStore", "PostgresStateStore", "run_migrations"]
