"""
services/user_service.py
------------------------
Business logic for managing broker users.
Orchestrates password hashing and the UserRepository.
"""

from typing import Optional
from uuid import UUID, uuid4

from psycopg2 import errors

from models.user import User
from repositories.user_repo import UserRepository
from security.passwords import hash_password, verify_password
from utils.logger import get_logger

logger = get_logger(__name__)

# Fields callers may change through update_user(); "password" is hashed first.
_EDITABLE_FIELDS = {
    "user_name",
    "client_id_prefix",
    "client_id",
    "validate_client_id",
    "throttle_user",
    "monthly_byte_limit",
}


class UserServiceError(Exception):
    """Base class for user management failures."""


class UserNameTakenError(UserServiceError):
    """The user name is already used by another row."""

    def __init__(self, user_name: str):
        super().__init__(f"User name '{user_name}' is already taken.")
        self.user_name = user_name


class UserNotFoundError(UserServiceError):
    """No user row matches the given id."""

    def __init__(self, user_id: UUID):
        super().__init__(f"User with identifier {user_id} not found.")
        self.user_id = user_id


class UserNotSavedError(UserServiceError):
    """A write statement affected no row."""


class UserService:
    """
    Handles all business logic related to broker users.

    Workflow for creation:
        1. Check whether the name is taken (fast path only).
        2. Hash the password and assign a new id.
        3. Insert; the store's unique index has the final word.
    """

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    async def create_user(
        self,
        user_name: str,
        password: str,
        client_id_prefix: str = "",
        client_id: str = "",
        validate_client_id: bool = False,
        throttle_user: bool = False,
        monthly_byte_limit: Optional[int] = None,
    ) -> User:
        """
        Create and persist a new user.

        Returns:
            The stored User.

        Raises:
            UserNameTakenError: If the name is reserved, including by a
                soft-deleted user or by a concurrent insert.
            UserNotSavedError: If the insert affected no row.
        """
        if await self.repo.user_name_exists(user_name):
            logger.warning(f"User name '{user_name}' already exists")
            raise UserNameTakenError(user_name)

        user = User(
            id=uuid4(),
            user_name=user_name,
            client_id_prefix=client_id_prefix,
            client_id=client_id,
            validate_client_id=validate_client_id,
            throttle_user=throttle_user,
            monthly_byte_limit=monthly_byte_limit,
            password_hash=hash_password(password),
        )
        try:
            inserted = await self.repo.insert_user(user)
        except errors.UniqueViolation as e:
            logger.warning(f"User name '{user_name}' was taken by a concurrent insert")
            raise UserNameTakenError(user_name) from e

        if not inserted:
            raise UserNotSavedError(f"User '{user_name}' could not be inserted.")
        return user

    async def update_user(self, user_id: UUID, password: Optional[str] = None, **changes) -> User:
        """
        Apply changes to an existing user.

        Args:
            user_id: Id of the user to change.
            password: New plaintext password, hashed before storing.
            **changes: Any of the editable User fields.

        Raises:
            ValueError: For unknown field names.
            UserNotFoundError: If no user has the id.
            UserNameTakenError: If the new name is reserved, including by a
                soft-deleted user.
        """
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        user = await self.repo.get_user_by_id(user_id)
        if user is None:
            logger.warning(f"User with identifier {user_id} not found.")
            raise UserNotFoundError(user_id)

        new_name = changes.get("user_name")
        if new_name is not None and new_name != user.user_name:
            if await self.repo.user_name_exists(new_name):
                logger.warning(f"User name '{new_name}' already exists")
                raise UserNameTakenError(new_name)

        for name, value in changes.items():
            setattr(user, name, value)
        if password is not None:
            user.password_hash = hash_password(password)

        try:
            updated = await self.repo.update_user(user)
        except errors.UniqueViolation as e:
            raise UserNameTakenError(user.user_name) from e

        if not updated:
            raise UserNotSavedError(f"User {user_id} could not be updated.")
        return user

    async def reset_password(self, user_id: UUID, new_password: str) -> None:
        """Store a new password hash for the user."""
        if not await self.repo.reset_password(user_id, hash_password(new_password)):
            raise UserNotFoundError(user_id)

    async def delete_user(self, user_id: UUID, permanently: bool = False) -> None:
        """
        Delete a user.

        Args:
            user_id: Id of the user.
            permanently: Remove the row instead of marking it deleted.
                A permanently deleted user cannot be recovered.
        """
        if permanently:
            deleted = await self.repo.delete_user_from_database(user_id)
        else:
            deleted = await self.repo.delete_user(user_id)
        if not deleted:
            raise UserNotFoundError(user_id)

    async def verify_credentials(self, user_name: str, password: str) -> Optional[User]:
        """
        Look up a live user and check the password.

        Returns:
            The User if the password matches, otherwise None.
        """
        user = await self.repo.get_user_by_name(user_name)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user
