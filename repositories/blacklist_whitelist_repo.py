"""
repositories/blacklist_whitelist_repo.py
----------------------------------------
Data access layer for maintaining blacklist and whitelist entries.
Reading a user's entries lives on ``UserRepository``.
"""

from typing import Optional
from uuid import UUID

from db.statements import Delete, Insert, Select, Update
from models.blacklist_whitelist import BlacklistWhitelist
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class BlacklistWhitelistRepository(BaseRepository):
    """Repository for CRUD operations on the blacklistwhitelist table."""

    async def get_item_by_id(self, item_id: UUID) -> Optional[BlacklistWhitelist]:
        """Fetch an entry by primary key, deleted or not."""
        row = await self._fetch_one(Select.BLACKLIST_WHITELIST_ITEM_BY_ID, {"id": item_id})
        return BlacklistWhitelist.from_row(row) if row else None

    async def insert_item(self, item: BlacklistWhitelist) -> bool:
        """
        Insert an entry for an existing user.

        Raises:
            psycopg2.errors.ForeignKeyViolation: If the user does not exist.
        """
        affected = await self._execute(
            Insert.BLACKLIST_WHITELIST_ITEM, item.to_params(), f"insert {item}"
        )
        if affected == 1:
            logger.info(f"Added {item} for user {item.user_id}")
        return affected == 1

    async def update_item(self, item: BlacklistWhitelist) -> bool:
        """Overwrite list kind, type and value of the entry with ``item.id``."""
        affected = await self._execute(
            Update.BLACKLIST_WHITELIST_ITEM, item.to_params(), f"update entry {item.id}"
        )
        return affected == 1

    async def delete_item(self, item_id: UUID) -> bool:
        """Mark an entry as deleted."""
        affected = await self._execute(
            Update.MARK_BLACKLIST_WHITELIST_ITEM_AS_DELETED,
            {"id": item_id},
            f"mark entry {item_id} as deleted",
        )
        return affected == 1

    async def delete_item_from_database(self, item_id: UUID) -> bool:
        """Remove an entry row for good."""
        affected = await self._execute(
            Delete.BLACKLIST_WHITELIST_ITEM, {"id": item_id}, f"delete entry {item_id}"
        )
        if affected == 1:
            logger.info(f"Deleted entry {item_id} from database")
        return affected == 1
