"""
models/user.py
--------------
Domain model for broker clients.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional
from uuid import UUID, uuid4


def utc_now() -> datetime:
    """Timezone-aware current time, used for ``created_at`` defaults."""
    return datetime.now(timezone.utc)


@dataclass
class User:
    """
    Represents a client that may connect to the broker.

    Attributes:
        user_name: Login name, unique among users that are not deleted.
        client_id_prefix: Prefix that client identifiers must start with.
        client_id: The fixed client identifier, if one is used.
        password_hash: One-way hash of the password, never the plaintext.
        validate_client_id: Whether the broker checks the client id.
        throttle_user: Whether the monthly byte limit applies.
        monthly_byte_limit: Traffic allowance per month (None = unlimited).
        id: Primary key, assigned by the caller before insert.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp of the last update, if any.
        deleted_at: Set when the user was soft-deleted.
    """
    user_name: str
    client_id_prefix: str = ""
    client_id: str = ""
    password_hash: str = field(default="", repr=False)
    validate_client_id: bool = False
    throttle_user: bool = False
    monthly_byte_limit: Optional[int] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def from_row(cls, row: Mapping) -> "User":
        """Convert a database row (column name -> value) to a User."""
        return cls(
            id=row["id"],
            user_name=row["username"],
            client_id_prefix=row["clientidprefix"],
            client_id=row["clientid"],
            validate_client_id=row["validateclientid"],
            throttle_user=row["throttleuser"],
            monthly_byte_limit=row["monthlybytelimit"],
            password_hash=row["passwordhash"],
            created_at=row["createdat"],
            updated_at=row["updatedat"],
            deleted_at=row["deletedat"],
        )

    def to_params(self) -> dict:
        """Named parameters for the insert and update statements."""
        return {
            "id": self.id,
            "user_name": self.user_name,
            "client_id_prefix": self.client_id_prefix,
            "client_id": self.client_id,
            "validate_client_id": self.validate_client_id,
            "throttle_user": self.throttle_user,
            "monthly_byte_limit": self.monthly_byte_limit,
            "password_hash": self.password_hash,
            "created_at": self.created_at,
        }

    def __str__(self) -> str:
        # never includes password_hash
        return (
            f"{{Id: {self.id}, UserName: {self.user_name}, "
            f"ClientIdPrefix: {self.client_id_prefix}, ClientId: {self.client_id}, "
            f"ValidateClientId: {self.validate_client_id}, ThrottleUser: {self.throttle_user}, "
            f"MonthlyByteLimit: {self.monthly_byte_limit}, CreatedAt: {self.created_at}, "
            f"DeletedAt: {self.deleted_at}, UpdatedAt: {self.updated_at}}}"
        )
