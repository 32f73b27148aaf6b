"""
models/blacklist_whitelist.py
-----------------------------
Domain model for access-control entries (topic blacklist and whitelist).

Both lists share one table; ``list_kind`` says which list an entry is on
and ``type`` which traffic direction it governs. ``value`` is a raw topic
pattern and is not interpreted here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Mapping, Optional
from uuid import UUID, uuid4

from models.user import utc_now


class BlacklistWhitelistType(IntEnum):
    """Traffic direction an entry applies to."""
    SUBSCRIBE = 0
    PUBLISH = 1


class ListKind(IntEnum):
    """Which list an entry belongs to."""
    BLACKLIST = 0
    WHITELIST = 1


@dataclass
class BlacklistWhitelist:
    """
    A single blacklist or whitelist entry for a user.

    Attributes:
        user_id: Owning user's id.
        list_kind: Blacklist or whitelist.
        type: Subscribe or publish.
        value: Topic pattern.
        id: Primary key.
        created_at / updated_at / deleted_at: Audit timestamps.
    """
    user_id: UUID
    list_kind: ListKind
    type: BlacklistWhitelistType
    value: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping) -> "BlacklistWhitelist":
        """Convert a database row to a BlacklistWhitelist entry."""
        return cls(
            id=row["id"],
            user_id=row["userid"],
            list_kind=ListKind(row["listkind"]),
            type=BlacklistWhitelistType(row["type"]),
            value=row["value"],
            created_at=row["createdat"],
            updated_at=row["updatedat"],
            deleted_at=row["deletedat"],
        )

    def to_params(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "list_kind": int(self.list_kind),
            "type": int(self.type),
            "value": self.value,
            "created_at": self.created_at,
        }

    def __str__(self) -> str:
        return f"{self.list_kind.name.lower()} {self.type.name.lower()} '{self.value}' ({self.id})"
