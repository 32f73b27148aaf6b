"""Tests for schema creation."""

import psycopg2
import pytest

from db.init_db import DROP_SQL, SCHEMA_SQL, create_tables, drop_tables


def test_schema_defines_live_username_unique_index():
    assert 'ON "user"(username) WHERE deletedat IS NULL' in SCHEMA_SQL
    assert "CREATE UNIQUE INDEX IF NOT EXISTS ix_user_username_live" in SCHEMA_SQL


def test_schema_is_idempotent():
    for line in SCHEMA_SQL.splitlines():
        if line.startswith("CREATE"):
            assert "IF NOT EXISTS" in line


def test_create_tables_commits_and_closes(fake_db):
    create_tables()

    assert fake_db.last_sql == SCHEMA_SQL
    conn = fake_db.connections[0]
    assert conn.commits == 1
    assert conn.closed


def test_drop_tables_removes_children_first(fake_db):
    drop_tables()

    assert fake_db.last_sql == DROP_SQL
    assert DROP_SQL.index("blacklistwhitelist") < DROP_SQL.index('"user"')


def test_create_tables_failure_rolls_back(fake_db):
    fake_db.add_result(error=psycopg2.ProgrammingError("syntax error"))

    with pytest.raises(psycopg2.ProgrammingError):
        create_tables()

    conn = fake_db.connections[0]
    assert conn.rollbacks == 1
    assert conn.closed


def test_create_tables_failure_on_dropped_connection_keeps_error(fake_db):
    error = psycopg2.OperationalError("server closed the connection unexpectedly")
    fake_db.add_result(error=error, drop_connection=True)

    with pytest.raises(psycopg2.OperationalError) as exc_info:
        create_tables()

    assert exc_info.value is error
    assert fake_db.connections[0].rollbacks == 0
