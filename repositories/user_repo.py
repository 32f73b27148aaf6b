"""
repositories/user_repo.py
--------------------------
Data access layer for broker users and the access-control entries
read on their behalf.
"""

from typing import Optional
from uuid import UUID

from db.statements import Delete, Insert, Select, Update
from models.blacklist_whitelist import BlacklistWhitelist, BlacklistWhitelistType, ListKind
from models.user import User
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """
    Repository for CRUD operations on the user table.

    Every write reports success as ``True`` only when exactly one row was
    affected. Zero rows is not an error. Driver errors propagate unchanged.
    """

    # ── READ ──────────────────────────────────────────────

    async def get_users(self) -> list[User]:
        """Get all users that are not deleted, ordered by name."""
        rows = await self._fetch_all(Select.ALL_USERS)
        return [User.from_row(r) for r in rows]

    async def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Fetch a user by primary key.

        Soft-deleted users are returned too, with ``deleted_at`` set.

        Returns:
            A User or None if no row matches.
        """
        row = await self._fetch_one(Select.USER_BY_ID, {"id": user_id})
        return User.from_row(row) if row else None

    async def get_user_by_name(self, user_name: str) -> Optional[User]:
        """Fetch a live user by their user name."""
        row = await self._fetch_one(Select.USER_BY_USER_NAME, {"user_name": user_name})
        return User.from_row(row) if row else None

    async def get_user_name_and_id_by_name(self, user_name: str) -> Optional[tuple[str, UUID]]:
        """
        Fetch only the name and id of a live user.

        Returns:
            ``(user_name, id)`` or None.
        """
        row = await self._fetch_one(
            Select.USER_NAME_AND_ID_BY_USER_NAME, {"user_name": user_name}
        )
        return (row["username"], row["id"]) if row else None

    async def user_name_exists(self, user_name: str) -> bool:
        """
        Check whether any row, deleted or not, uses the name.

        This is a separate round-trip from ``insert_user``; two concurrent
        creators can both see ``False``. The unique index on live user
        names is what finally rejects the second insert.
        """
        exists = await self._fetch_scalar(Select.USER_NAME_EXISTS, {"user_name": user_name})
        return bool(exists)

    async def get_all_client_id_prefixes(self) -> list[str]:
        """Get the client id prefixes of all live users."""
        rows = await self._fetch_all(Select.ALL_CLIENT_ID_PREFIXES)
        return [r["clientidprefix"] for r in rows]

    async def get_blacklist_items_for_user(
        self, user_id: UUID, item_type: BlacklistWhitelistType
    ) -> list[BlacklistWhitelist]:
        """Get the user's live blacklist entries for one traffic direction."""
        return await self._get_items_for_user(user_id, ListKind.BLACKLIST, item_type)

    async def get_whitelist_items_for_user(
        self, user_id: UUID, item_type: BlacklistWhitelistType
    ) -> list[BlacklistWhitelist]:
        """Get the user's live whitelist entries for one traffic direction."""
        return await self._get_items_for_user(user_id, ListKind.WHITELIST, item_type)

    # ── CREATE ────────────────────────────────────────────

    async def insert_user(self, user: User) -> bool:
        """
        Insert a fully populated user.

        The caller assigns ``user.id`` and ``user.password_hash`` first.

        Raises:
            psycopg2.errors.UniqueViolation: If a live user already has the name.
        """
        affected = await self._execute(
            Insert.USER, user.to_params(), f"insert user '{user.user_name}'"
        )
        if affected == 1:
            logger.info(f"Inserted user '{user.user_name}' ({user.id})")
        return affected == 1

    # ── UPDATE ────────────────────────────────────────────

    async def update_user(self, user: User) -> bool:
        """
        Overwrite all editable fields of the row with ``user.id``.

        Last writer wins. A soft-deleted row stays deleted.
        """
        affected = await self._execute(Update.USER, user.to_params(), f"update user {user.id}")
        if affected != 1:
            logger.warning(f"Update of user {user.id} affected {affected} rows")
        return affected == 1

    async def reset_password(self, user_id: UUID, hashed_password: str) -> bool:
        """Replace only the password hash of a user."""
        affected = await self._execute(
            Update.RESET_PASSWORD_FOR_USER,
            {"id": user_id, "password_hash": hashed_password},
            f"reset password for user {user_id}",
        )
        if affected == 1:
            logger.info(f"Reset password for user {user_id}")
        return affected == 1

    # ── DELETE ────────────────────────────────────────────

    async def delete_user(self, user_id: UUID) -> bool:
        """
        Mark a user as deleted. The row stays in the database with a
        deletion timestamp and its name stays reserved.

        Returns:
            True if a live row was marked, False otherwise.
        """
        affected = await self._execute(
            Update.MARK_USER_AS_DELETED, {"id": user_id}, f"mark user {user_id} as deleted"
        )
        if affected == 1:
            logger.info(f"Marked user {user_id} as deleted")
        return affected == 1

    async def delete_user_from_database(self, user_id: UUID) -> bool:
        """Remove a user row for good. This cannot be undone."""
        affected = await self._execute(Delete.USER, {"id": user_id}, f"delete user {user_id}")
        if affected == 1:
            logger.info(f"Deleted user {user_id} from database")
        return affected == 1

    # ── HELPERS ───────────────────────────────────────────

    async def _get_items_for_user(
        self, user_id: UUID, list_kind: ListKind, item_type: BlacklistWhitelistType
    ) -> list[BlacklistWhitelist]:
        rows = await self._fetch_all(
            Select.BLACKLIST_WHITELIST_ITEMS_FOR_USER,
            {"user_id": user_id, "list_kind": int(list_kind), "type": int(item_type)},
        )
        return [BlacklistWhitelist.from_row(r) for r in rows]
