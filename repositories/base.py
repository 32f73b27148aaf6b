"""
repositories/base.py
--------------------
Shared plumbing for all repositories.

Each helper opens one connection, runs one statement and closes the
connection again. The blocking psycopg2 work runs on a worker thread so
repository methods can be awaited without stalling the event loop. The
connection is closed inside the worker, so it is released even when the
awaiting task is cancelled.
"""

import asyncio
from typing import Any, Optional

from psycopg2 import extras

from db.connection import DatabaseSettings, open_connection, rollback
from utils.logger import get_logger

logger = get_logger(__name__)


class BaseRepository:
    """
    Base class holding the connection settings and the statement runners.

    Args:
        settings: Connection settings. ``None`` means the settings from
            ``config`` are read each time a connection is opened.
    """

    def __init__(self, settings: Optional[DatabaseSettings] = None):
        self.settings = settings

    # ── READ ──────────────────────────────────────────────

    async def _fetch_all(self, sql: str, params: Optional[dict] = None) -> list[dict]:
        """Run a query and return all rows as column-name dicts."""
        return await asyncio.to_thread(self._fetch_all_sync, sql, params)

    async def _fetch_one(self, sql: str, params: Optional[dict] = None) -> Optional[dict]:
        """Run a query and return the first row, or None."""
        return await asyncio.to_thread(self._fetch_one_sync, sql, params)

    async def _fetch_scalar(self, sql: str, params: Optional[dict] = None) -> Any:
        """Run a query and return the first column of the first row, or None."""
        return await asyncio.to_thread(self._fetch_scalar_sync, sql, params)

    # ── WRITE ─────────────────────────────────────────────

    async def _execute(self, sql: str, params: dict, action: str) -> int:
        """
        Run a write statement and commit it.

        Args:
            sql: Statement from ``db.statements``.
            params: Named parameters.
            action: Short description used in the failure log line.

        Returns:
            The number of affected rows.

        Raises:
            psycopg2.Error: Unchanged from the driver, after a rollback.
        """
        return await asyncio.to_thread(self._execute_sync, sql, params, action)

    # ── BLOCKING IMPLEMENTATIONS ──────────────────────────

    def _fetch_all_sync(self, sql: str, params: Optional[dict]) -> list[dict]:
        with open_connection(self.settings) as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                return [dict(row) for row in cur.fetchall()]

    def _fetch_one_sync(self, sql: str, params: Optional[dict]) -> Optional[dict]:
        with open_connection(self.settings) as conn:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return dict(row) if row else None

    def _fetch_scalar_sync(self, sql: str, params: Optional[dict]) -> Any:
        with open_connection(self.settings) as conn:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return row[0] if row else None

    def _execute_sync(self, sql: str, params: dict, action: str) -> int:
        with open_connection(self.settings) as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, params)
                    affected = cur.rowcount
                conn.commit()
                return affected
            except Exception as e:
                logger.error(f"Failed to {action}: {e}")
                rollback(conn)
                raise
