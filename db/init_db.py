"""
db/init_db.py
-------------
Creates the database schema (tables and indexes) if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from typing import Optional

from db.connection import DatabaseSettings, open_connection, rollback
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: broker clients and their throttling policy
CREATE TABLE IF NOT EXISTS "user" (
    id                  UUID PRIMARY KEY,
    username            TEXT NOT NULL,
    clientidprefix      TEXT NOT NULL DEFAULT '',
    clientid            TEXT NOT NULL DEFAULT '',
    validateclientid    BOOLEAN NOT NULL DEFAULT FALSE,
    throttleuser        BOOLEAN NOT NULL DEFAULT FALSE,
    monthlybytelimit    BIGINT,
    passwordhash        TEXT NOT NULL,
    createdat           TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updatedat           TIMESTAMPTZ,
    deletedat           TIMESTAMPTZ
);

-- Blacklist and whitelist entries share one table, told apart by listkind
-- (0 = blacklist, 1 = whitelist); type is 0 = subscribe, 1 = publish
CREATE TABLE IF NOT EXISTS blacklistwhitelist (
    id                  UUID PRIMARY KEY,
    userid              UUID NOT NULL REFERENCES "user"(id) ON DELETE CASCADE,
    listkind            SMALLINT NOT NULL CHECK (listkind IN (0, 1)),
    type                SMALLINT NOT NULL CHECK (type IN (0, 1)),
    value               TEXT NOT NULL,
    createdat           TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updatedat           TIMESTAMPTZ,
    deletedat           TIMESTAMPTZ
);

-- Ledger of applied schema revisions
CREATE TABLE IF NOT EXISTS databaseversion (
    id                  UUID PRIMARY KEY,
    name                TEXT NOT NULL,
    number              BIGINT NOT NULL,
    createdat           TIMESTAMPTZ NOT NULL DEFAULT NOW(),
    updatedat           TIMESTAMPTZ,
    deletedat           TIMESTAMPTZ
);

-- No two live users share a name
CREATE UNIQUE INDEX IF NOT EXISTS ix_user_username_live
    ON "user"(username) WHERE deletedat IS NULL;

CREATE INDEX IF NOT EXISTS ix_blacklistwhitelist_lookup
    ON blacklistwhitelist(userid, listkind, type);
"""

DROP_SQL = """
DROP TABLE IF EXISTS blacklistwhitelist;
DROP TABLE IF EXISTS databaseversion;
DROP TABLE IF EXISTS "user";
"""


def _run_script(sql: str, action: str, settings: Optional[DatabaseSettings]) -> None:
    with open_connection(settings) as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
            conn.commit()
            logger.info(f"Database schema {action} finished successfully.")
        except Exception as e:
            logger.error(f"Database schema {action} failed: {e}")
            rollback(conn)
            raise


def create_tables(settings: Optional[DatabaseSettings] = None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _run_script(SCHEMA_SQL, "initialization", settings)


def drop_tables(settings: Optional[DatabaseSettings] = None) -> None:
    """Drop all tables. Used to reset test databases."""
    _run_script(DROP_SQL, "drop", settings)


if __name__ == "__main__":
    create_tables()
    print("Database schema created successfully.")
