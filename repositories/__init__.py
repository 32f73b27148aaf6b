"""
repositories/ - Data Access Layer
==================================
Each repository wraps the statements for one entity from ``db.statements``.
Repositories receive raw rows from the database and return domain model objects.
"""

from repositories.blacklist_whitelist_repo import BlacklistWhitelistRepository
from repositories.database_version_repo import DatabaseVersionRepository
from repositories.user_repo import UserRepository

__all__ = [
    "BlacklistWhitelistRepository",
    "DatabaseVersionRepository",
    "UserRepository",
]
