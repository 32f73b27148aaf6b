"""
models/database_version.py
--------------------------
Domain model for the schema revision ledger.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional
from uuid import UUID, uuid4

from models.user import utc_now


@dataclass
class DatabaseVersion:
    """
    One applied schema revision.

    Attributes:
        name: Revision name, e.g. 'initial'.
        number: Revision number assigned by the migration tool.
        id: Primary key.
        created_at / updated_at / deleted_at: Audit timestamps.
    """
    name: str
    number: int
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Mapping) -> "DatabaseVersion":
        return cls(
            id=row["id"],
            name=row["name"],
            number=row["number"],
            created_at=row["createdat"],
            updated_at=row["updatedat"],
            deleted_at=row["deletedat"],
        )

    def to_params(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "number": self.number,
            "created_at": self.created_at,
        }

    def __str__(self) -> str:
        return f"#{self.number} {self.name}"
