"""
repositories/database_version_repo.py
-------------------------------------
Data access layer for the schema revision ledger.
"""

from typing import Optional
from uuid import UUID

from db.statements import Delete, Insert, Select, Update
from models.database_version import DatabaseVersion
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseVersionRepository(BaseRepository):
    """Repository for CRUD operations on the databaseversion table."""

    # ── READ ──────────────────────────────────────────────

    async def get_database_versions(self) -> list[DatabaseVersion]:
        """Get all live revisions ordered by number."""
        rows = await self._fetch_all(Select.ALL_DATABASE_VERSIONS)
        return [DatabaseVersion.from_row(r) for r in rows]

    async def get_database_version_by_id(self, version_id: UUID) -> Optional[DatabaseVersion]:
        row = await self._fetch_one(Select.DATABASE_VERSION_BY_ID, {"id": version_id})
        return DatabaseVersion.from_row(row) if row else None

    async def get_database_version_by_name(self, name: str) -> Optional[DatabaseVersion]:
        row = await self._fetch_one(Select.DATABASE_VERSION_BY_NAME, {"name": name})
        return DatabaseVersion.from_row(row) if row else None

    # ── CREATE ────────────────────────────────────────────

    async def insert_database_version(self, version: DatabaseVersion) -> bool:
        affected = await self._execute(
            Insert.DATABASE_VERSION, version.to_params(), f"insert database version {version}"
        )
        if affected == 1:
            logger.info(f"Recorded database version {version}")
        return affected == 1

    # ── UPDATE ────────────────────────────────────────────

    async def update_database_version(self, version: DatabaseVersion) -> bool:
        affected = await self._execute(
            Update.DATABASE_VERSION, version.to_params(), f"update database version {version.id}"
        )
        return affected == 1

    # ── DELETE ────────────────────────────────────────────

    async def delete_database_version(self, version_id: UUID) -> bool:
        """Mark a revision as deleted, keeping the row."""
        affected = await self._execute(
            Update.MARK_DATABASE_VERSION_AS_DELETED,
            {"id": version_id},
            f"mark database version {version_id} as deleted",
        )
        return affected == 1

    async def delete_database_version_from_database(self, version_id: UUID) -> bool:
        """Remove a revision row for good."""
        affected = await self._execute(
            Delete.DATABASE_VERSION, {"id": version_id}, f"delete database version {version_id}"
        )
        if affected == 1:
            logger.info(f"Deleted database version {version_id} from database")
        return affected == 1
