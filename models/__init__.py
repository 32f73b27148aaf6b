"""
models/ - Domain Entities
=========================
Plain dataclasses for the rows stored by the repositories.
Each entity knows how to build itself from a database row and how to
expose its fields as named statement parameters.
"""

from models.blacklist_whitelist import BlacklistWhitelist, BlacklistWhitelistType, ListKind
from models.database_version import DatabaseVersion
from models.user import User

__all__ = [
    "BlacklistWhitelist",
    "BlacklistWhitelistType",
    "DatabaseVersion",
    "ListKind",
    "User",
]
