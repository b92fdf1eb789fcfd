"""
PostgreSQL state store adapter - Implements StateStore protocol.

This module provides the PostgreSQL implementation of the domain's
key-value persistence port using psycopg3 with raw SQL.

Storage Layout:
---------------
One row per collection in ``kv_store``:

    key        TEXT PRIMARY KEY   ('accounts' | 'notifications')
    value      JSONB              full collection, most-recent-first
    updated_at TIMESTAMPTZ

Every save replaces the whole collection with an upsert
(INSERT ... ON CONFLICT DO UPDATE). There is no transaction spanning the
two keys: the domain writes them one after the other.
"""

import logging
from pathlib import Path
from typing import Any

import psycopg
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool

from src.domain.exceptions import PersistenceUnavailable
from src.domain.persistence import validate_collection

logger = logging.getLogger(__name__)


class PostgresStateStore:
    """
    Implements StateStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def load(self, key: str) -> list[dict[str, Any]] | None:
        """
        Fetch a collection by key.

        Returns:
            Decoded records, or None when the key was never saved

        Raises:
            PersistenceCorrupt: Stored JSON is not a list of objects
            PersistenceUnavailable: Database error
        """
        sql = "SELECT value FROM kv_store WHERE key = %s"

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (key,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            raise PersistenceUnavailable(f"Failed to load {key!r}") from e

        if row is None:
            return None
        # psycopg decodes JSONB into Python objects
        return validate_collection(key, row[0])

    def save(self, key: str, records: list[dict[str, Any]]) -> None:
        """
        Replace a collection atomically (single-row upsert).

        Raises:
            PersistenceUnavailable: Database error
        """
        sql = """
            INSERT INTO kv_store (key, value, updated_at)
            VALUES (%s, %s, NOW())
            ON CONFLICT (key) DO UPDATE
            SET value = EXCLUDED.value,
                updated_at = NOW()
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (key, Jsonb(records)))
                conn.commit()
        except psycopg.Error as e:
            raise PersistenceUnavailable(f"Failed to save {key!r}") from e

    def ping(self) -> None:
        """Run a trivial query; raises PersistenceUnavailable if the database is down."""
        try:
            with self._pool.connection() as conn:
                conn.execute("SELECT 1")
        except psycopg.Error as e:
            raise PersistenceUnavailable("Database unreachable") from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/storage/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except (OSError, psycopg.Error) as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
