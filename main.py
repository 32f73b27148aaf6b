"""
main.py
-------
Command-line entry point for the broker access-control store.

Commands:
    init-db     Create the schema and record its revision in the ledger.
    users       List live users with their client id prefixes.
    versions    List the applied schema revisions.

Usage:
    python main.py init-db
"""

import argparse
import asyncio
import sys

from config import SCHEMA_VERSION_NAME, SCHEMA_VERSION_NUMBER
from db.init_db import create_tables
from models.database_version import DatabaseVersion
from repositories.database_version_repo import DatabaseVersionRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


async def init_db() -> None:
    """Create tables and record the current schema revision once."""
    # ── 1. Schema ─────────────────────────────────────────
    logger.info("Initializing database...")
    await asyncio.to_thread(create_tables)

    # ── 2. Ledger ─────────────────────────────────────────
    repo = DatabaseVersionRepository()
    if await repo.get_database_version_by_name(SCHEMA_VERSION_NAME) is not None:
        logger.info(f"Schema revision '{SCHEMA_VERSION_NAME}' already recorded.")
        return
    version = DatabaseVersion(name=SCHEMA_VERSION_NAME, number=SCHEMA_VERSION_NUMBER)
    if not await repo.insert_database_version(version):
        raise RuntimeError(f"Could not record schema revision {version}")


async def list_users() -> None:
    users = await UserRepository().get_users()
    if not users:
        print("No users.")
        return
    for user in users:
        print(f"{user.id}  {user.user_name:<24} prefix={user.client_id_prefix!r}")


async def list_versions() -> None:
    versions = await DatabaseVersionRepository().get_database_versions()
    if not versions:
        print("No schema revisions recorded.")
        return
    for version in versions:
        print(f"{version.number:>5}  {version.name:<24} {version.created_at:%Y-%m-%d %H:%M:%S}")


COMMANDS = {
    "init-db": init_db,
    "users": list_users,
    "versions": list_versions,
}


def main(argv=None) -> int:
    """Parse arguments and run the chosen command."""
    parser = argparse.ArgumentParser(description="Broker access-control store.")
    parser.add_argument("command", choices=sorted(COMMANDS))
    args = parser.parse_args(argv)

    try:
        asyncio.run(COMMANDS[args.command]())
    except Exception as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
