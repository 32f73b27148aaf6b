"""
Shared pytest fixtures.

Provides:
- A fake psycopg2 driver that records every connection and statement and
  returns scripted results, so repositories run without a server.
- Row builders that turn entities into the dicts psycopg2 would return.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Optional

import psycopg2
import pytest

from models.blacklist_whitelist import BlacklistWhitelist
from models.database_version import DatabaseVersion
from models.user import User


# ============================================================================
# Fake driver
# ============================================================================

@dataclass
class FakeResult:
    """What the next executed statement returns."""
    rows: list = field(default_factory=list)
    rowcount: Optional[int] = None
    error: Optional[Exception] = None
    drop_connection: bool = False


class FakeCursor:
    def __init__(self, conn: "FakeConnection", cursor_factory=None):
        self.conn = conn
        self.cursor_factory = cursor_factory
        self.rowcount = -1
        self._rows: list = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.db.executed.append((sql, params))
        result = self.conn.db.next_result()
        if result.drop_connection:
            self.conn.closed = 2
        if result.error is not None:
            raise result.error
        self._rows = list(result.rows)
        self.rowcount = result.rowcount if result.rowcount is not None else len(self._rows)

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self, db: "FakeDatabase", kwargs: dict):
        self.db = db
        self.kwargs = kwargs
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def cursor(self, cursor_factory=None):
        return FakeCursor(self, cursor_factory)

    def commit(self):
        self.commits += 1

    def rollback(self):
        if self.closed:
            raise psycopg2.InterfaceError("connection already closed")
        if self.db.rollback_error is not None:
            raise self.db.rollback_error
        self.rollbacks += 1

    def close(self):
        self.closed = self.closed or 1


class FakeDatabase:
    """Stands in for the server behind ``psycopg2.connect``."""

    def __init__(self):
        self.connections: list[FakeConnection] = []
        self.executed: list[tuple] = []
        self._results: deque = deque()
        self.rollback_error: Optional[Exception] = None

    def add_result(self, rows=(), rowcount=None, error=None, drop_connection=False) -> None:
        self._results.append(FakeResult(list(rows), rowcount, error, drop_connection))

    def next_result(self) -> FakeResult:
        return self._results.popleft() if self._results else FakeResult()

    def connect(self, **kwargs) -> FakeConnection:
        conn = FakeConnection(self, kwargs)
        self.connections.append(conn)
        return conn

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]

    @property
    def all_closed(self) -> bool:
        return all(c.closed for c in self.connections)


@pytest.fixture
def fake_db(monkeypatch) -> FakeDatabase:
    """Route every ``psycopg2.connect`` call to a fresh FakeDatabase."""
    db = FakeDatabase()
    monkeypatch.setattr(psycopg2, "connect", db.connect)
    return db


# ============================================================================
# Row builders
# ============================================================================

def _user_row(user: User) -> dict:
    return {
        "id": user.id,
        "username": user.user_name,
        "clientidprefix": user.client_id_prefix,
        "clientid": user.client_id,
        "validateclientid": user.validate_client_id,
        "throttleuser": user.throttle_user,
        "monthlybytelimit": user.monthly_byte_limit,
        "passwordhash": user.password_hash,
        "createdat": user.created_at,
        "updatedat": user.updated_at,
        "deletedat": user.deleted_at,
    }


def _item_row(item: BlacklistWhitelist) -> dict:
    return {
        "id": item.id,
        "userid": item.user_id,
        "listkind": int(item.list_kind),
        "type": int(item.type),
        "value": item.value,
        "createdat": item.created_at,
        "updatedat": item.updated_at,
        "deletedat": item.deleted_at,
    }


def _version_row(version: DatabaseVersion) -> dict:
    return {
        "id": version.id,
        "name": version.name,
        "number": version.number,
        "createdat": version.created_at,
        "updatedat": version.updated_at,
        "deletedat": version.deleted_at,
    }


@pytest.fixture
def user_row():
    return _user_row


@pytest.fixture
def item_row():
    return _item_row


@pytest.fixture
def version_row():
    return _version_row


@pytest.fixture
def alice() -> User:
    return User(
        user_name="alice",
        client_id_prefix="alice-",
        client_id="alice-1",
        password_hash="hash",
        validate_client_id=True,
        throttle_user=True,
        monthly_byte_limit=1_000_000,
    )
